import statistics

import pytest

from algokit.design import FEED_SIZE, MedianFinder, Twitter


def test_median_worked_example():
    finder = MedianFinder()
    finder.add_num(1)
    finder.add_num(2)
    assert finder.find_median() == 1.5
    finder.add_num(3)
    assert finder.find_median() == 2


def test_median_of_empty_stream_raises():
    with pytest.raises(ValueError):
        MedianFinder().find_median()


def test_median_single_value():
    finder = MedianFinder()
    finder.add_num(-7)
    assert finder.find_median() == -7


@pytest.mark.parametrize(
    "stream",
    [
        [5, 15, 1, 3],
        [2, 3, 4],
        [10, -1, 7, 7, 0, 3, 8, -5, 12],
        [4, 4, 4, 4],
        list(range(30, 0, -1)),
    ],
)
def test_median_matches_statistics_after_every_add(stream):
    finder = MedianFinder()
    for count, num in enumerate(stream, start=1):
        finder.add_num(num)
        assert len(finder) == count
        assert finder.find_median() == statistics.median(stream[:count])


def test_twitter_worked_example():
    twitter = Twitter()
    twitter.post_tweet(1, 5)
    assert twitter.get_news_feed(1) == [5]
    twitter.follow(1, 2)
    twitter.post_tweet(2, 6)
    assert twitter.get_news_feed(1) == [6, 5]
    twitter.unfollow(1, 2)
    assert twitter.get_news_feed(1) == [5]


def test_feed_of_unknown_user_is_empty():
    assert Twitter().get_news_feed(42) == []


def test_feed_is_limited_and_most_recent_first():
    twitter = Twitter()
    for tweet_id in range(15):
        twitter.post_tweet(1, tweet_id)
    feed = twitter.get_news_feed(1)
    assert len(feed) == FEED_SIZE
    assert feed == list(reversed(range(15)))[:FEED_SIZE]


def test_feed_interleaves_followed_users_by_time():
    twitter = Twitter()
    twitter.follow(1, 2)
    twitter.follow(1, 3)
    twitter.post_tweet(2, 20)
    twitter.post_tweet(1, 10)
    twitter.post_tweet(3, 30)
    twitter.post_tweet(2, 21)
    assert twitter.get_news_feed(1) == [21, 30, 10, 20]
    assert twitter.get_news_feed(2) == [21, 20]


def test_self_follow_does_not_duplicate_tweets():
    twitter = Twitter()
    twitter.post_tweet(1, 5)
    twitter.follow(1, 1)
    assert twitter.get_news_feed(1) == [5]
    twitter.unfollow(1, 1)
    assert twitter.get_news_feed(1) == [5]


def test_repeated_follow_does_not_duplicate_tweets():
    twitter = Twitter()
    twitter.post_tweet(2, 6)
    twitter.follow(1, 2)
    twitter.follow(1, 2)
    assert twitter.get_news_feed(1) == [6]
    twitter.unfollow(1, 2)
    assert twitter.get_news_feed(1) == []


def test_unfollow_without_follow_is_noop():
    twitter = Twitter()
    twitter.post_tweet(1, 5)
    twitter.post_tweet(2, 6)
    twitter.unfollow(1, 2)
    assert twitter.get_news_feed(1) == [5]