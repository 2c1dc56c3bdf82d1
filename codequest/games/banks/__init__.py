"""
codequest/games/banks
Static question banks, one module per language. Each bank is a list of
plain dicts in ``Question.from_dict`` form; the catalogue validates them.
"""
