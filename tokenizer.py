from exceptions import EmptyInput


def tokenize(raw):
    '''
    Splits raw input into lowercase words on runs of whitespace.
    Raises EmptyInput when nothing but whitespace was given.
    '''
    if raw is None or not raw.strip():
        raise EmptyInput()
    return raw.strip().lower().split()
