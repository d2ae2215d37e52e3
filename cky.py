from exceptions import EmptyInput, InputTooLong, UnknownWord
from log_utils import logger
from ptree import ParseNode

MAX_TOKENS = 64


class Chart(object):
    """
    The CKY table for one sentence: a set of variables for every span
    (start, end), start <= end, tokens inclusive.

    The cells live in a flat list of size (n + 1) * n // 2, allocated once:

        start | 0 1 2 ... n-1   (end)
        ------------------------
        0     | D D D ... D
        1     |   D D ... D
        ...
        n-1   |           D
    """

    def __init__(self, tokens, start_variable):
        self.tokens = tuple(tokens)
        self.n = len(self.tokens)
        if self.n == 0:
            raise ValueError("a chart needs at least one token")
        self.start = start_variable
        self._cells = [set() for _ in range((self.n + 1) * self.n // 2)]

    def _offset(self, start, end):
        # rows before `start` hold n + (n-1) + ... + (n-start+1) cells
        if not 0 <= start <= end < self.n:
            raise IndexError(f"span ({start}, {end}) outside sentence of length {self.n}")
        return start * (2 * self.n - start + 1) // 2 + end - start

    def get(self, start, end):
        return self._cells[self._offset(start, end)]

    def spans(self, length):
        for i in range(self.n - length + 1):
            yield i, i + length - 1

    def accepted(self):
        return self.start in self.get(0, self.n - 1)

    def __repr__(self):
        return f"Chart(n={self.n}, accepted={self.accepted()})"


class CKYParser(object):
    def __init__(self, grammar, max_tokens=MAX_TOKENS):
        self.grammar = grammar
        self.max_tokens = max_tokens
        self._unit_rules = grammar.unit_rules()

    def parse(self, tokens):
        '''
        Fills the chart for tokens bottom-up and returns it.
        Raises EmptyInput, InputTooLong or UnknownWord before filling any span
        longer than one word.
        '''
        if not tokens:
            raise EmptyInput("Empty sentence")
        if self.max_tokens is not None and len(tokens) > self.max_tokens:
            raise InputTooLong(len(tokens), self.max_tokens)

        tokens = [token.lower() for token in tokens]
        chart = Chart(tokens, self.grammar.start)
        n = chart.n

        # 1
        for i, token in enumerate(tokens):
            cell = chart.get(i, i)
            if self.grammar.is_terminal(token):
                cell.update(self.grammar.producers_of(token))
            if not cell:
                logger.debug("unknown word %r at position %d", token, i)
                raise UnknownWord(token, i)
            self._close_unit_rules(cell)

        # 2
        for length in range(2, n + 1):
            for i, j in chart.spans(length):
                cell = chart.get(i, j)
                for k in range(i, j):
                    left_cell = chart.get(i, k)
                    right_cell = chart.get(k + 1, j)
                    if not left_cell or not right_cell:
                        continue
                    for b in left_cell:
                        for c in right_cell:
                            cell.update(self.grammar.producers_of(b, c))
                self._close_unit_rules(cell)

        logger.debug("chart filled for %d tokens, accepted=%s", n, chart.accepted())
        return chart

    def _close_unit_rules(self, cell):
        bool_while = True
        while bool_while:
            bool_while = False
            for rule in self._unit_rules:
                if rule.variable not in cell and rule.derivation[0] in cell:
                    cell.add(rule.variable)
                    bool_while = True

    def build_tree(self, chart, symbol=None):
        '''
        Rebuilds one derivation of symbol (the start symbol by default) over
        the whole chart. Productions are tried in grammar order and split
        points from left to right, so the first match always wins.
        '''
        tokens = chart.tokens
        productions_for = self.grammar.productions_for

        def build_node(start, end, symbol, seen):
            if start == end and (tokens[start],) in productions_for(symbol):
                return ParseNode(symbol, word=tokens[start])

            for k in range(start, end):
                for derivation in productions_for(symbol):
                    if len(derivation) == 2:
                        left, right = derivation
                        if left in chart.get(start, k) and right in chart.get(k + 1, end):
                            return ParseNode(symbol, [
                                build_node(start, k, left, ()),
                                build_node(k + 1, end, right, ()),
                            ])

            # unit rules stay on the same span; seen stops A -> B -> A loops
            seen = seen + (symbol,)
            for derivation in productions_for(symbol):
                if len(derivation) == 1 and not self.grammar.is_terminal(derivation[0]):
                    child_symbol = derivation[0]
                    if child_symbol in seen or child_symbol not in chart.get(start, end):
                        continue
                    child = build_node(start, end, child_symbol, seen)
                    if child.children or child.is_leaf():
                        return ParseNode(symbol, [child])

            return ParseNode(symbol)

        if symbol is None:
            symbol = chart.start
        return build_node(0, chart.n - 1, symbol, ())
