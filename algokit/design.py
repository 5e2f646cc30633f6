"""Small stateful data structures: a running median and a tweet feed."""

from __future__ import annotations

import heapq
import itertools
from collections import defaultdict

FEED_SIZE = 10


class MedianFinder:
    """Keep a stream of integers and report its median at any time."""

    def __init__(self) -> None:
        self._lows: list[int] = []  # max-heap of the lower half, stored negated
        self._highs: list[int] = []  # min-heap of the upper half

    def __len__(self) -> int:
        return len(self._lows) + len(self._highs)

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        if len(self._lows) == len(self._highs):
            heapq.heappush(self._highs, num)
        else:
            heapq.heappush(self._lows, -num)
        if not self._lows:
            return
        low, high = -self._lows[0], self._highs[0]
        if low > high:
            heapq.heapreplace(self._lows, -high)
            heapq.heapreplace(self._highs, low)

    def find_median(self) -> float:
        """Return the median of all numbers added so far.

        Raises ValueError if no number has been added.
        """
        if not self._highs:
            raise ValueError("median of an empty stream")
        if len(self._highs) > len(self._lows):
            return float(self._highs[0])
        return (self._highs[0] - self._lows[0]) / 2


class Twitter:
    """A minimal social feed: users post tweets and follow one another."""

    def __init__(self) -> None:
        self._clock = itertools.count()
        self._tweets: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
        self._follows: defaultdict[int, list[int]] = defaultdict(list)

    def post_tweet(self, user_id: int, tweet_id: int) -> None:
        """Record a new tweet by ``user_id``."""
        self._tweets[user_id].append((next(self._clock), tweet_id))

    def get_news_feed(self, user_id: int) -> list[int]:
        """Return up to ten most recent tweet ids by the user and those they follow."""
        authors = [user_id, *self._follows.get(user_id, [])]
        tweets = itertools.chain.from_iterable(
            self._tweets.get(author, []) for author in authors
        )
        return [tweet_id for _, tweet_id in heapq.nlargest(FEED_SIZE, tweets)]

    def follow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` follow ``followee_id``; self-follows are ignored."""
        if follower_id == followee_id:
            return
        followees = self._follows[follower_id]
        if followee_id not in followees:
            followees.append(followee_id)

    def unfollow(self, follower_id: int, followee_id: int) -> None:
        """Stop ``follower_id`` following ``followee_id``; unknown pairs are ignored."""
        if follower_id == followee_id:
            return
        followees = self._follows.get(follower_id)
        if followees and followee_id in followees:
            followees.remove(followee_id)