"""Classic algorithms over strings."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import product

_DIGITS = frozenset(string.digits)
_UPPERCASE = frozenset(string.ascii_uppercase)
_LOWERCASE = frozenset(string.ascii_lowercase)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    if len(s) < 2:
        return len(s)
    best = 0
    start = 0
    last_seen: dict[str, int] = {}
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on a tie."""
    if len(s) < 2:
        return s
    best = s[0]
    for i in range(len(s)):
        for j in range(i + 1, len(s)):
            candidate = s[i : j + 1]
            if len(candidate) > len(best) and candidate == candidate[::-1]:
                best = candidate
    return best


def _check_digits(num: str) -> None:
    if not num or not set(num) <= _DIGITS:
        raise ValueError(f"not a decimal number: {num!r}")


def multiply(num1: str, num2: str) -> str:
    """Multiply two decimal numbers given as strings; return the product as a string.

    Raises ValueError if either argument is not a non-empty string of digits.
    """
    _check_digits(num1)
    _check_digits(num2)
    if num1 == "0" or num2 == "0":
        return "0"
    digits = [0] * (len(num1) + len(num2))
    for j, d2 in reversed(list(enumerate(num2))):
        for i, d1 in reversed(list(enumerate(num1))):
            total = int(d1) * int(d2) + digits[i + j + 1]
            digits[i + j + 1] = total % 10
            digits[i + j] += total // 10
    if digits[0] == 0:
        digits = digits[1:]
    return "".join(map(str, digits))


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter reachable by changing at most ``k`` letters.

    Raises ValueError if ``s`` holds anything but uppercase ASCII letters.
    """
    if not set(s) <= _UPPERCASE:
        raise ValueError("only uppercase letters A-Z are allowed")
    counts: Counter[str] = Counter()
    most = 0
    left = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        most = max(most, counts[ch])
        if right - left + 1 - most > k:
            counts[s[left]] -= 1
            left += 1
    return len(s) - left


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


def _build_trie(words: Iterable[str]) -> _TrieNode:
    root = _TrieNode()
    for word in words:
        if not set(word) <= _LOWERCASE:
            raise ValueError(f"only lowercase letters a-z are allowed: {word!r}")
        node = root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True
    return root


def _is_concatenation(word: str, root: _TrieNode, parts: int) -> bool:
    node = root
    for k, ch in enumerate(word):
        node = node.children.get(ch)
        if node is None:
            return False
        if node.terminal:
            if k >= len(word) - 1:
                return parts > 0
            if _is_concatenation(word[k + 1 :], root, parts + 1):
                return True
    return False


def find_all_concatenated_words(words: Sequence[str]) -> list[str]:
    """Return, in input order, the words made of two or more words from the list.

    Raises ValueError if a word holds anything but lowercase ASCII letters.
    """
    root = _build_trie(words)
    return [word for word in words if _is_concatenation(word, root, 0)]


def _is_subsequence(candidate: str, s: str) -> bool:
    remaining = iter(s)
    return all(ch in remaining for ch in candidate)


def find_longest_word(s: str, dictionary: Sequence[str]) -> str:
    """Return the longest word obtainable by deleting letters of ``s``.

    Ties go to the lexicographically smallest word; "" if none qualifies.
    """
    if not s or not dictionary:
        return ""
    best = ""
    for word in dictionary:
        if len(word) > len(s) or not _is_subsequence(word, s):
            continue
        if len(word) > len(best) or (len(word) == len(best) and word < best):
            best = word
    return best


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance (insertions, deletions, substitutions) between two words."""
    if not word1 or not word2:
        return len(word1) + len(word2)
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            substitution = previous[j - 1] + (a != b)
            current.append(min(previous[j] + 1, current[j - 1] + 1, substitution))
        previous = current
    return previous[-1]


def reorganize_string(s: str) -> str:
    """Rearrange ``s`` so no two neighbours are equal; "" if that is impossible.

    The two most frequent remaining characters are taken in turn; between
    characters of equal frequency the later one in the alphabet goes first.
    """
    counts = Counter(s)
    if counts and max(counts.values()) > (len(s) + 1) // 2:
        return ""
    parts: list[str] = []
    for _ in range(len(s) // 2 + 1):
        available = [ch for ch, count in counts.items() if count > 0]
        ranked = sorted(available, key=lambda ch: (counts[ch], ch), reverse=True)[:2]
        for ch in ranked:
            parts.append(ch)
            counts[ch] -= 1
    return "".join(parts)


def _valid_octet(part: str) -> bool:
    if len(part) == 3:
        return "100" <= part <= "255"
    if len(part) == 2:
        return "10" <= part <= "99"
    return len(part) == 1


def restore_ip_addresses(s: str) -> list[str]:
    """Return every dotted IPv4 address that can be formed from the digits of ``s``."""
    if len(s) < 4:
        return []
    addresses: list[str] = []
    for x, y, z in product(range(1, 4), repeat=3):
        if x + y + z >= len(s):
            continue
        parts = (s[:x], s[x : x + y], s[x + y : x + y + z], s[x + y + z :])
        if all(_valid_octet(part) for part in parts):
            addresses.append(".".join(parts))
    return addresses


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Tell whether ``s3`` interleaves ``s1`` and ``s2``, by dynamic programming."""
    if len(s1) + len(s2) != len(s3):
        return False
    reachable = [[False] * (len(s1) + 1) for _ in range(len(s2) + 1)]
    for i in range(len(s2) + 1):
        for j in range(len(s1) + 1):
            if i == 0 and j == 0:
                reachable[i][j] = True
                continue
            from_s2 = i > 0 and reachable[i - 1][j] and s2[i - 1] == s3[i + j - 1]
            from_s1 = j > 0 and reachable[i][j - 1] and s1[j - 1] == s3[i + j - 1]
            reachable[i][j] = from_s2 or from_s1
    return reachable[len(s2)][len(s1)]


def is_interleave_recursive(s1: str, s2: str, s3: str) -> bool:
    """Tell whether ``s3`` interleaves ``s1`` and ``s2``, by memoised recursion."""
    if len(s1) + len(s2) != len(s3):
        return False

    @lru_cache(maxsize=None)
    def walk(i: int, j: int) -> bool:
        if i == len(s1) and j == len(s2):
            return True
        k = i + j
        if i < len(s1) and s1[i] == s3[k] and walk(i + 1, j):
            return True
        return j < len(s2) and s2[j] == s3[k] and walk(i, j + 1)

    return walk(0, 0)