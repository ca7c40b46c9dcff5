from lispcell.reader.parser import lex, check_balance, TokenStream, ReadResult, read, read_all

__all__ = ["lex", "check_balance", "TokenStream", "ReadResult", "read", "read_all"]
