import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from cky import CKYParser, MAX_TOKENS
from diagnostics import diagnose
from exceptions import EmptyInput, InputTooLong, UnknownWord, ValidationError
from grammar import default_grammar
from log_utils import logger
from ptree import ParseNode
from tokenizer import tokenize


class ErrorKind(enum.Enum):
    EMPTY_INPUT = "empty_input"
    UNKNOWN_WORD = "unknown_word"
    STRUCTURAL = "structural"
    INPUT_TOO_LONG = "input_too_long"


_ERROR_KINDS = {
    EmptyInput: ErrorKind.EMPTY_INPUT,
    UnknownWord: ErrorKind.UNKNOWN_WORD,
    InputTooLong: ErrorKind.INPUT_TOO_LONG,
}


@dataclass(frozen=True)
class Valid:
    """The sentence is in the language; parse_tree is one derivation of it."""

    parse_tree: ParseNode

    is_valid = True

    def to_dict(self):
        return {"is_valid": True, "parse_tree": self.parse_tree.to_dict()}


@dataclass(frozen=True)
class Invalid:
    message: str
    error_position: int = 0
    error_word: Optional[str] = None
    kind: ErrorKind = ErrorKind.STRUCTURAL

    is_valid = False

    @classmethod
    def from_error(cls, error):
        return cls(
            message=error.message,
            error_position=error.position,
            error_word=getattr(error, "word", None),
            kind=_ERROR_KINDS[type(error)],
        )

    def to_dict(self):
        d = {
            "is_valid": False,
            "error": self.message,
            "error_position": self.error_position,
            "kind": self.kind.value,
        }
        if self.error_word is not None:
            d["error_word"] = self.error_word
        return d


class Validator(object):
    '''
    Tokenizes a sentence, parses it with CKY and either rebuilds a parse tree
    or diagnoses the failure. Never raises for bad input.
    '''

    def __init__(self, grammar, max_tokens=MAX_TOKENS):
        self.grammar = grammar
        self.parser = CKYParser(grammar, max_tokens=max_tokens)

    def validate(self, sentence):
        try:
            tokens = tokenize(sentence)
        except EmptyInput as e:
            logger.debug("empty input")
            return Invalid.from_error(e)
        return self.validate_tokens(tokens)

    def validate_tokens(self, tokens):
        try:
            chart = self.parser.parse(tokens)
        except ValidationError as e:
            logger.debug("rejected before chart fill: %s", e.message)
            return Invalid.from_error(e)

        if chart.accepted():
            tree = self.parser.build_tree(chart)
            logger.debug("valid: %s", tree)
            return Valid(tree)

        message, position = diagnose(chart)
        logger.debug("invalid: %s (position %d)", message, position)
        return Invalid(message, position)

    def grammar_rules(self):
        return self.grammar.rules()

    def format_grammar_rules(self):
        return self.grammar.format()


@lru_cache(maxsize=None)
def default_validator():
    return Validator(default_grammar())


def validate_sentence(sentence):
    return default_validator().validate(sentence)


def get_grammar_rules():
    return default_validator().grammar_rules()


def format_grammar_rules():
    return default_validator().format_grammar_rules()
