"""Grid, graph and search puzzles."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from typing import Protocol

_WALL = "X"
_OPEN = "O"


def _neighbours(board: list[list[str]], i: int, j: int):
    for di, dj in ((0, -1), (0, 1), (-1, 0), (1, 0)):
        ni, nj = i + di, j + dj
        if 0 <= ni < len(board) and 0 <= nj < len(board[ni]):
            yield ni, nj


def solve_surrounded(board: list[list[str]]) -> None:
    """Fill in place every region of 'O' cells that does not touch the border with 'X'."""
    rows = len(board)
    safe: set[tuple[int, int]] = set()
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            on_border = i in (0, rows - 1) or j in (0, len(row) - 1)
            if on_border and cell == _OPEN:
                safe.add((i, j))
                queue.append((i, j))
    while queue:
        i, j = queue.popleft()
        for ni, nj in _neighbours(board, i, j):
            if board[ni][nj] == _OPEN and (ni, nj) not in safe:
                safe.add((ni, nj))
                queue.append((ni, nj))
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == _OPEN and (i, j) not in safe:
                row[j] = _WALL


def find_min_height_trees(n: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the roots that give a tree of ``n`` nodes its minimum height.

    Leaves are peeled off layer by layer until one or two nodes remain.
    Raises ValueError if the edges hold a cycle that stops the peeling.
    """
    if n == 1:
        return [0]
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    degree = [len(neighbours) for neighbours in adjacency]
    leaves = [node for node, d in enumerate(degree) if d == 1]
    remaining = n
    while remaining > 2:
        if not leaves:
            raise ValueError("the edges do not form a tree")
        next_leaves: list[int] = []
        for leaf in leaves:
            remaining -= 1
            for neighbour in adjacency[leaf]:
                degree[neighbour] -= 1
                if degree[neighbour] == 1:
                    next_leaves.append(neighbour)
        leaves = next_leaves
    return leaves


def find_circle_num(matrix: Sequence[Sequence[int]]) -> int:
    """Count the friend circles in a symmetric adjacency matrix."""
    visited: set[int] = set()
    circles = 0
    for start in range(len(matrix)):
        if start in visited:
            continue
        circles += 1
        visited.add(start)
        stack = [start]
        while stack:
            person = stack.pop()
            for other, linked in enumerate(matrix[person]):
                if linked == 1 and other not in visited:
                    visited.add(other)
                    stack.append(other)
    return circles


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from top-left to bottom-right avoiding cells marked 1."""
    if not grid or not grid[0] or grid[0][0] == 1:
        return 0
    paths = [0] * len(grid[0])
    paths[0] = 1
    for row in grid:
        for j, cell in enumerate(row):
            if cell == 1:
                paths[j] = 0
            elif j > 0:
                paths[j] += paths[j - 1]
    return paths[-1]


class Master(Protocol):
    """Something that scores a guess against a hidden secret word."""

    def guess(self, word: str) -> int:
        ...


def match_count(a: str, b: str) -> int:
    """Return how many positions hold the same letter in both words."""
    return sum(x == y for x, y in zip(a, b))


def _best_guess(words: list[str]) -> str:
    best_word = words[0]
    best_worst = len(words) + 1
    for word in words:
        worst = max(Counter(match_count(word, other) for other in words).values())
        if worst < best_worst:
            best_word, best_worst = word, worst
    return best_word


def find_secret_word(wordlist: Sequence[str], master: Master) -> str:
    """Guess words from ``wordlist`` with ``master`` until the secret is hit; return it.

    Each guess is the word whose largest group of equally scoring candidates
    is smallest. Raises ValueError if the candidates run out.
    """
    candidates = list(wordlist)
    while candidates:
        word = _best_guess(candidates)
        score = master.guess(word)
        if score == len(word):
            return word
        candidates = [w for w in candidates if w != word and match_count(w, word) == score]
    raise ValueError("the secret word is not in the word list")