from __future__ import annotations


class SdnError(Exception):
    """ Base class for all SDN errors"""
    pass


class SdnSyntaxError(SdnError):
    """ Raised when the source text does not match the grammar"""

    def __init__(self, source: str, pos: int, expected: str):
        self.pos = pos
        self.expected = expected
        self.line = source.count("\n", 0, pos) + 1
        self.column = pos - (source.rfind("\n", 0, pos) + 1) + 1
        super().__init__(
            f"expected {expected} at line {self.line}, column {self.column} (offset {pos})"
        )


class SdnKeywordError(SdnError):
    """ Raised when a keyword inside a list is misused"""

    def __init__(self, keyword: str, message: str):
        self.keyword = keyword
        super().__init__(message)


class DanglingKeywordError(SdnKeywordError):
    """ Raised when a keyword has no value following it"""

    def __init__(self, keyword: str):
        super().__init__(keyword, f"keyword ':{keyword}' is not followed by a value")


class DuplicateKeywordError(SdnKeywordError):
    """ Raised when a keyword appears twice in the same list"""

    def __init__(self, keyword: str):
        super().__init__(keyword, f"keyword ':{keyword}' is given more than once")


class SdnInternalError(SdnError):
    """ Raised when the grammar and the tree builder disagree (a reader defect)"""


class SdnSerializeError(SdnError):
    """ Raised when a value has no canonical SDN text"""


class SdnConfigError(SdnError):
    """ Raised when reader/printer options are invalid"""
