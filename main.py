import sys
import json
import argparse

from cky import MAX_TOKENS
from grammar import default_grammar
from log_utils import configure_run_logging, logger, remove_handlers
from validator import Validator

DATA_FILE = None

EXAMPLE_SENTENCES = [
    'the student reads a book',
    'a teacher writes',
    'the dog chases the cat',
    'a chatbot talks',
    'the student teaches the teacher',
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Check sentences against the toy grammar with a CYK parser."
    )
    parser.add_argument("sentences", nargs="*")
    parser.add_argument("--data_file", type=str, default=DATA_FILE)
    parser.add_argument("--examples", action="store_true")
    parser.add_argument("--show_grammar", action="store_true")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--max_tokens", type=int, default=MAX_TOKENS)
    parser.add_argument("--log_dir", type=str, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def read_sentences(path):
    with open(path, "r") as file_data:
        return [line for line in file_data.read().splitlines() if line.strip()]


def render(sentence, result):
    if result.is_valid:
        return sentence + ": valid\n" + result.parse_tree.pretty()
    text = f"{sentence}: {result.message} (position {result.error_position})"
    if result.error_word is not None:
        text += f" [word: {result.error_word}]"
    return text


def run(args):
    validator = Validator(default_grammar(), max_tokens=args.max_tokens)

    if args.show_grammar:
        print(validator.format_grammar_rules(), end="")

    sentences = list(args.sentences)
    if args.data_file:
        sentences.extend(read_sentences(args.data_file))
    if args.examples:
        sentences.extend(EXAMPLE_SENTENCES)

    all_valid = True
    for sentence in sentences:
        result = validator.validate(sentence)
        all_valid = all_valid and result.is_valid
        if args.json:
            print(json.dumps(dict(sentence=sentence, **result.to_dict())))
        else:
            print(render(sentence, result))
            print("---------------------")

    logger.info("validated %d sentences", len(sentences))
    return 0 if all_valid else 1


def main(argv=None):
    args = parse_args(argv)
    handlers = configure_run_logging(logger, args.log_dir, args.verbose)
    try:
        return run(args)
    finally:
        remove_handlers(logger, handlers)


if __name__ == '__main__':
    sys.exit(main())
