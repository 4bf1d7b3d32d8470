"""
String utility functions for title-casing catalog names.
"""

from typing import Optional

# Short function words that stay lowercase unless they start the string.
# Only words under four letters are kept lowercase, plus catalog joining words.
ALWAYS_LOWERCASE_WORDS = frozenset([
    "a", "an", "and", "as", "at", "but", "by", "for", "in", "nor", "of",
    "on", "or", "per", "the", "to", "via", "v", "v.", "vs", "vs.",
    "feat", "feat.", "pres", "pres.",
])

# Punctuation ignored when looking a word up in ALWAYS_LOWERCASE_WORDS
_WORD_PUNCTUATION = "()[]{},:;!?\"'"


def capitalize_word(word: str) -> str:
    """
    Uppercase the first alphanumeric character of a word, leaving the rest as-is.
    
    Leading punctuation is skipped so that "(remix" becomes "(Remix".
    """
    for index, char in enumerate(word):
        if char.isalnum():
            return word[:index] + char.upper() + word[index + 1:]
    return word


def is_lowercase_word(word: str) -> bool:
    """Check whether a word belongs to the always-lowercase list."""
    return word.lower().strip(_WORD_PUNCTUATION) in ALWAYS_LOWERCASE_WORDS


def to_title_case(text: Optional[str]) -> str:
    """
    Title-case a string, keeping short function words lowercase.
    
    The first word carrying any letter or digit is always capitalized.
    Whitespace between words is preserved.
    
    Args:
        text: Text to title-case
        
    Returns:
        Title-cased text
    """
    if not text:
        return ""
    
    words = text.split(" ")
    result = []
    started = False
    
    for word in words:
        if not started and any(char.isalnum() for char in word):
            result.append(capitalize_word(word))
            started = True
        elif started and is_lowercase_word(word):
            result.append(word.lower())
        else:
            result.append(capitalize_word(word))
    
    return " ".join(result)
