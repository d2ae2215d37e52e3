from itertools import chain
from collections import defaultdict

from exceptions import GrammarError

START_SYMBOL = 'S'


class Rule(object):
    def __init__(self, variable, derivation):
        self.variable = str(variable)
        self.derivation = tuple(derivation)

    def derivation_length(self):
        return len(self.derivation)

    def __repr__(self):
        compact_derivation = " ".join(self.derivation)
        return self.variable + ' -> ' + compact_derivation

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.variable == other.variable and self.derivation == other.derivation

    def __hash__(self):
        return hash((self.variable, self.derivation))


GRAMMAR_RULES = [
    Rule('S', ('NP', 'VP')),
    Rule('NP', ('Det', 'N')),
    Rule('VP', ('V', 'NP')),
    Rule('VP', ('V',)),
    Rule('Det', ('the',)),
    Rule('Det', ('a',)),
    Rule('N', ('student',)),
    Rule('N', ('teacher',)),
    Rule('N', ('book',)),
    Rule('N', ('apple',)),
    Rule('N', ('chatbot',)),
    Rule('N', ('dog',)),
    Rule('N', ('cat',)),
    Rule('V', ('reads',)),
    Rule('V', ('writes',)),
    Rule('V', ('teaches',)),
    Rule('V', ('eats',)),
    Rule('V', ('talks',)),
    Rule('V', ('chases',)),
    Rule('V', ('likes',)),
]


class Grammar(object):
    '''
    An immutable context-free grammar in near-CNF.

    Every right-hand side is a single terminal word, a single variable
    (unit rule) or a pair of variables. Variables are exactly the symbols
    that appear on some left-hand side; every other symbol is a terminal.
    '''

    def __init__(self, rules, start_variable=START_SYMBOL):
        self.start = start_variable
        grouped = defaultdict(list)
        for rule in rules:
            grouped[rule.variable].append(rule)
        self._rules = {variable: tuple(group) for variable, group in grouped.items()}
        self._variables = frozenset(self._rules)

        if self.start not in self._variables:
            raise GrammarError(f"start symbol {self.start!r} has no rules")

        # reverse index: derivation -> variables producing it, in rule order
        producers = defaultdict(list)
        for rule in self.all_rules():
            self._check_rule(rule)
            if rule.variable not in producers[rule.derivation]:
                producers[rule.derivation].append(rule.variable)
        self._producers = {derivation: tuple(vs) for derivation, vs in producers.items()}

    def _check_rule(self, rule):
        n = rule.derivation_length()
        if n == 2:
            if any(self.is_terminal(c) for c in rule.derivation):
                raise GrammarError(f"binary rule must derive two variables: {rule!r}")
        elif n != 1:
            raise GrammarError(f"right-hand side must have 1 or 2 symbols: {rule!r}")

    def all_rules(self):
        return chain(*self._rules.values())

    def rules(self):
        return list(self.all_rules())

    def variables(self):
        """
        Returns V, in the order the left-hand sides first appear
        """
        return list(self._rules.keys())

    def is_terminal(self, c):
        """
        Returns whether c is in Σ
        """
        return c not in self._variables

    def non_terminals(self):
        return set(self._variables)

    def terminals(self):
        return {rule.derivation[0] for rule in self.all_rules()
                if rule.derivation_length() == 1 and self.is_terminal(rule.derivation[0])}

    def productions_for(self, symbol):
        '''
        Right-hand sides of every rule for symbol, in insertion order.
        '''
        return [rule.derivation for rule in self._rules.get(symbol, ())]

    def producers_of(self, *derivation):
        '''
        Variables that derive exactly the given right-hand side.
        '''
        return self._producers.get(tuple(derivation), ())

    def unit_rules(self):
        return [rule for rule in self.all_rules()
                if rule.derivation_length() == 1 and not self.is_terminal(rule.derivation[0])]

    def format(self):
        lines = []
        for variable, group in self._rules.items():
            rights = ' | '.join(' '.join(rule.derivation) for rule in group)
            lines.append(f"{variable} -> {rights}\n")
        return ''.join(lines)

    def __repr__(self):
        return f"Grammar(start={self.start!r}, rules={len(self.rules())})"


def default_grammar():
    return Grammar(GRAMMAR_RULES)
