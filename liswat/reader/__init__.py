"""Reader: lexer, numeric literal decoding and parser."""
