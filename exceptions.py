class GrammarError(ValueError):
    '''
    Raised when a rule table cannot form a grammar the CKY parser accepts.
    '''


class ValidationError(Exception):
    '''
    Base class for the ways a sentence can fail before its chart is complete.
    Carries the message shown to the user and the offending token index.
    '''

    def __init__(self, message, position=0):
        super().__init__(message)
        self.message = message
        self.position = position


class EmptyInput(ValidationError):
    def __init__(self, message="Please enter a sentence to validate"):
        super().__init__(message, 0)


class UnknownWord(ValidationError):
    def __init__(self, word, position):
        super().__init__(f'Unknown word: "{word}"', position)
        self.word = word


class InputTooLong(ValidationError):
    def __init__(self, length, limit):
        super().__init__(f"Sentence too long: {length} words (maximum {limit})", limit)
        self.length = length
        self.limit = limit
