"""
Verbatim string literal escaping

Literal template text ends up inside C# verbatim string literals (@"...").
The only character needing treatment there is the double quote, which is
written twice.
"""


def verbatim_escape(text: str) -> str:
    """
    Escape text for use inside @"..."

    Example:
        >>> verbatim_escape('Say "hi"')
        'Say ""hi""'
    """
    return text.replace('"', '""')


def verbatim_unescape(text: str) -> str:
    """
    Inverse of verbatim_escape: what the C# compiler reads back

    Example:
        >>> verbatim_unescape('Say ""hi""')
        'Say "hi"'
    """
    return text.replace('""', '"')
