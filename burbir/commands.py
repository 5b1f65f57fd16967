"""Interactive tweet and draft commands for the signed-in user."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from burbir.clock import DateTime
from burbir.drafts import DraftStack
from burbir.reader import TapeReader, is_only_blank
from burbir.tweets import Tweet, TweetTable, create_tweet

UBAH = "UBAH"
HAPUS = "HAPUS"
SIMPAN = "SIMPAN"
TERBIT = "TERBIT"
KEMBALI = "KEMBALI"


class Session:
    """Commands run by one user, reading answers from a tape reader.

    ``own_tweet_ids`` is any container with ``append`` that collects the ids
    of tweets the user publishes with ``kicau``.
    """

    def __init__(
        self,
        user_name: str,
        reader: TapeReader,
        out: TextIO | None = None,
        tweets: TweetTable | None = None,
        drafts: DraftStack | None = None,
        own_tweet_ids: Any = None,
    ) -> None:
        self.user_name = user_name
        self.reader = reader
        self.out = out if out is not None else sys.stdout
        self.tweets = tweets if tweets is not None else TweetTable(0)
        self.drafts = drafts if drafts is not None else DraftStack()
        self.own_tweet_ids = own_tweet_ids if own_tweet_ids is not None else []

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _publish(self, tweet: Tweet) -> None:
        tweet.tweet_id = self.tweets.max_id + 1
        self.tweets.add(tweet)

    def kicau(self) -> Tweet | None:
        """Publish a new tweet; return it, or None if it held only blanks."""
        self._write("\nMasukkan kicauan:\n")
        text = self.reader.read_sentence()
        if is_only_blank(text):
            self._write("\nKicauan tidak boleh hanya berisi spasi!\n")
            return None
        tweet_id = self.tweets.max_id + 1
        tweet = create_tweet(tweet_id, text, self.user_name)
        self.tweets.add(tweet)
        self.own_tweet_ids.append(tweet_id)
        self._write("\nSelamat! kicauan telah diterbitkan!\n")
        self._write("Detil kicauan:\n")
        self._write(tweet.detail())
        return tweet

    def kicauan(self) -> None:
        """Show every tweet written by the user."""
        for tweet in self.tweets:
            if tweet.author == self.user_name:
                self._write("\n")
                self._write(tweet.detail())

    def ubah_kicauan(self, tweet_id: int) -> None:
        """Replace the text of one of the user's own tweets."""
        tweet = self.tweets.search(tweet_id)
        if tweet is None:
            self._write(f"\nTidak ditemukan kicauan dengan ID = {tweet_id}!;")
            return
        if tweet.author != self.user_name:
            self._write(f"\nKicauan dengan ID = {tweet_id} bukan milikmu!")
            return
        self._write("\nMasukkan kicauan baru: \n")
        tweet.text = self.reader.read_sentence()
        self._write("\nSelamat! kicauan telah diterbitkan!")
        self._write(tweet.detail())

    def buat_draf(self) -> None:
        """Write a draft, then delete, save or publish it."""
        self._write("\nMasukkan draf:\n")
        text = self.reader.read_sentence()
        draft = create_tweet(-1, text, self.user_name)
        self._write(
            "\nApakah anda ingin menghapus, menyimpan, atau menerbitkan draf ini?\n"
        )
        action = self.reader.read_word()
        if action == HAPUS:
            self._write("\nDraf telah berhasil dihapus!")
        elif action == SIMPAN:
            self.drafts.push(draft)
            self._write("\nDraf telah berhasil disimpan!\n")
        elif action == TERBIT:
            self._publish(draft)
            self._write("\nSelamat! draf kicauan telah diterbitkan!\n")
            self._write("Detil kicauan:")
            self._write(draft.detail())

    def lihat_draf(self) -> None:
        """Take the latest draft off the stack and edit, delete or publish it."""
        if self.drafts.is_empty():
            self._write("\nYah, anda belum memiliki draf apapun! Buat dulu ya :D\n")
            return
        draft = self.drafts.pop()
        self._write("\nIni draf terakhir anda:")
        self._write(f"\n| {draft.time}\n")
        self._write(f"| {draft.text}\n")
        self._write(
            "\nApakah anda ingin mengubah, menghapus, atau menerbitkan draf ini?"
            " (KEMBALI jika ingin kembali)\n"
        )
        action = self.reader.read_word_with_blank()
        if action == UBAH:
            self._write("\nMasukkan draf yang baru:\n")
            draft.text = self.reader.read_sentence()
            draft.time = DateTime.now()
            self._write(
                "Apakah anda ingin menghapus, menyimpan, atau menerbitkan draf ini?"
            )
            follow_up = self.reader.read_word()
            if follow_up == HAPUS:
                self._write("\nDraf telah berhasil dihapus!")
            elif follow_up == SIMPAN:
                self.drafts.push(draft)
                self._write("\nDraf telah berhasil disimpan!")
            elif follow_up == TERBIT:
                self._publish_with_detail(draft)
        elif action == HAPUS:
            self._write("\nDraf telah berhasil dihapus!")
        elif action == TERBIT:
            self._publish_with_detail(draft)
        elif action == KEMBALI:
            self._write("Kembali")

    def _publish_with_detail(self, draft: Tweet) -> None:
        self._publish(draft)
        self._write("Selamat! draf kicauan telah diterbitkan!\n")
        self._write("Detil kicauan:")
        self._write(draft.detail())