class LispError(Exception):
    """ Base class for all lispcell errors"""
    pass

class LispInvalidSymbol(LispError):
    """ Raised when something other than a symbol is used as a binding name"""
    pass

class LispUnboundSymbol(LispError):
    """ Raised when a symbol is looked up or assigned before it is bound"""
    pass

class LispSyntaxError(LispError):
    """ Raised when an input line cannot be turned into a tree"""

class LispStackExhausted(LispError):
    """ Raised when evaluation recurses past the interpreter's limit"""
