import pytest

from exceptions import GrammarError
from grammar import GRAMMAR_RULES, Grammar, Rule, default_grammar


FORMATTED = (
    "S -> NP VP\n"
    "NP -> Det N\n"
    "VP -> V NP | V\n"
    "Det -> the | a\n"
    "N -> student | teacher | book | apple | chatbot | dog | cat\n"
    "V -> reads | writes | teaches | eats | talks | chases | likes\n"
)


@pytest.fixture
def grammar():
    return default_grammar()


def test_productions_keep_insertion_order(grammar):
    assert grammar.productions_for('VP') == [('V', 'NP'), ('V',)]
    assert grammar.productions_for('Det') == [('the',), ('a',)]
    assert grammar.productions_for('missing') == []


def test_symbol_kinds(grammar):
    assert grammar.non_terminals() == {'S', 'NP', 'VP', 'Det', 'N', 'V'}
    assert grammar.terminals() == {
        'the', 'a',
        'student', 'teacher', 'book', 'apple', 'chatbot', 'dog', 'cat',
        'reads', 'writes', 'teaches', 'eats', 'talks', 'chases', 'likes',
    }
    assert grammar.is_terminal('book')
    assert not grammar.is_terminal('NP')
    assert grammar.variables() == ['S', 'NP', 'VP', 'Det', 'N', 'V']


@pytest.mark.parametrize(
    "derivation, producers",
    [
        (('the',), ('Det',)),
        (('cat',), ('N',)),
        (('NP', 'VP'), ('S',)),
        (('V',), ('VP',)),
        (('barks',), ()),
        (('VP', 'NP'), ()),
    ],
)
def test_reverse_lookup(grammar, derivation, producers):
    assert grammar.producers_of(*derivation) == producers


def test_rules_are_a_copy(grammar):
    rules = grammar.rules()
    assert rules == GRAMMAR_RULES
    rules.clear()
    assert len(grammar.rules()) == 20


def test_unit_rules(grammar):
    assert grammar.unit_rules() == [Rule('VP', ('V',))]


def test_format(grammar):
    assert grammar.format() == FORMATTED


@pytest.mark.parametrize(
    "rules",
    [
        [Rule('S', ('NP', 'VP', 'PP')), Rule('NP', ('x',)), Rule('VP', ('y',)), Rule('PP', ('z',))],
        [Rule('S', ('NP', 'b')), Rule('NP', ('x',))],
        [Rule('S', ())],
        [Rule('A', ('x',))],
    ],
)
def test_rejects_rules_outside_near_cnf(rules):
    with pytest.raises(GrammarError):
        Grammar(rules)


def test_custom_start_symbol():
    g = Grammar([Rule('ROOT', ('x',))], start_variable='ROOT')
    assert g.start == 'ROOT'
    assert g.producers_of('x') == ('ROOT',)


def test_rule_equality():
    assert Rule('S', ['NP', 'VP']) == Rule('S', ('NP', 'VP'))
    assert Rule('S', ('NP', 'VP')) != Rule('S', ('VP', 'NP'))
    assert repr(Rule('VP', ('V', 'NP'))) == 'VP -> V NP'
    assert len({Rule('N', ('cat',)), Rule('N', ('cat',))}) == 1
