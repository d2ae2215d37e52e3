class ParseNode(object):
    '''
    A node of a parse tree.

    A leaf holds the surface word its label was derived from. An inner node
    holds two children (binary rule) or one child (unit rule such as VP -> V).
    '''

    def __init__(self, label, children=(), word=None):
        self.label = label
        self.children = tuple(children)
        self.word = word

    def is_leaf(self):
        return self.word is not None

    def leaves(self):
        '''
        The words under this node, left to right.
        '''
        if self.is_leaf():
            return [self.word]
        words = []
        for child in self.children:
            words.extend(child.leaves())
        return words

    def pretty(self, indent_str='  '):
        lines = []

        def rec_pretty(node, level):
            if node.is_leaf():
                lines.append(f"{indent_str * level}{node.label}\t{node.word}")
            else:
                lines.append(f"{indent_str * level}{node.label}")
                for child in node.children:
                    rec_pretty(child, level + 1)

        rec_pretty(self, 0)
        return '\n'.join(lines) + '\n'

    def to_dict(self):
        d = {'label': self.label, 'children': [c.to_dict() for c in self.children]}
        if self.word is not None:
            d['word'] = self.word
        return d

    def __str__(self):
        if self.is_leaf():
            return f"({self.label} {self.word})"
        if not self.children:
            return f"({self.label})"
        return f"({self.label} {' '.join(str(c) for c in self.children)})"

    def __repr__(self):
        return f"ParseNode({str(self)})"

    def __eq__(self, other):
        if not isinstance(other, ParseNode):
            return NotImplemented
        return (self.label, self.word, self.children) == (other.label, other.word, other.children)

    def __hash__(self):
        return hash((self.label, self.word, self.children))
