"""Tweets and the growable table that holds every published tweet."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator
from dataclasses import dataclass

from burbir.clock import DateTime
from burbir.replies import ReplyNode

UNDEFINED_INDEX = -1


@dataclass
class Tweet:
    """A published (or drafted) tweet with its likes and reply tree."""

    tweet_id: int
    text: str
    author: str
    time: DateTime
    likes: int = 0
    replies: ReplyNode | None = None
    reply_count: int = 0
    thread: object | None = None

    def detail(self) -> str:
        """Return the tweet as shown to users."""
        return (
            f"| ID = {self.tweet_id}\n"
            f"| {self.author}\n"
            f"| {self.time}\n"
            f"| {self.text}\n"
            f"| Disukai = {self.likes}\n"
        )


def create_tweet(tweet_id: int, text: str, author: str) -> Tweet:
    """Return a new tweet without likes or replies, stamped with the current time."""
    return Tweet(tweet_id=tweet_id, text=text, author=author, time=DateTime.now())


class TweetTable:
    """Tweets in the order they were added, with a capacity that grows on demand.

    ``max_id`` counts every tweet ever added and is used to number new ones.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._tweets: list[Tweet] = []
        self._capacity = capacity
        self.max_id = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._tweets)

    def __iter__(self) -> Iterator[Tweet]:
        return iter(self._tweets)

    def __getitem__(self, index: int) -> Tweet:
        return self._tweets[index]

    def __repr__(self) -> str:
        return (
            f"TweetTable(capacity={self._capacity}, max_id={self.max_id}, "
            f"tweets={len(self._tweets)})"
        )

    def copy(self) -> TweetTable:
        """Return a table with its own copies of the tweets.

        Reply trees are shared between a tweet and its copy.
        """
        table = TweetTable(self._capacity)
        table._tweets = [_copy.copy(tweet) for tweet in self._tweets]
        table.max_id = self.max_id
        return table

    def add(self, tweet: Tweet) -> None:
        """Append a tweet, growing the capacity by one when full."""
        if len(self._tweets) >= self._capacity:
            self.expand(1)
        self._tweets.append(tweet)
        self.max_id += 1

    def contains(self, tweet_id: int) -> bool:
        return self.index_of(tweet_id) != UNDEFINED_INDEX

    def index_of(self, tweet_id: int) -> int:
        """Return the index of the first tweet with the id, or -1."""
        for index, tweet in enumerate(self._tweets):
            if tweet.tweet_id == tweet_id:
                return index
        return UNDEFINED_INDEX

    def delete(self, tweet_id: int) -> Tweet | None:
        """Remove the first tweet with the id and return it; None if absent."""
        index = self.index_of(tweet_id)
        if index == UNDEFINED_INDEX:
            return None
        return self._tweets.pop(index)

    def expand(self, amount: int) -> None:
        """Grow the capacity by the given amount."""
        if self._capacity + amount < len(self._tweets):
            raise ValueError("capacity would fall below the number of tweets")
        self._capacity += amount

    def search(self, tweet_id: int) -> Tweet | None:
        """Return the tweet with the id, or None."""
        index = self.index_of(tweet_id)
        return None if index == UNDEFINED_INDEX else self._tweets[index]