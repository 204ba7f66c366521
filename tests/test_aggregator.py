from __future__ import annotations

import random

from core.domain.models import AggregatedPost, AggregatedUser, Comment, Post, User
from core.services.aggregator import aggregate_data, find_dangling_references


def _users():
    return [User(id=1, name="Alice"), User(id=2, name="Bob"), User(id=3, name="Carol")]


def _posts():
    return [
        Post(id=10, user_id=1, title="first"),
        Post(id=11, user_id=2, title="second"),
        Post(id=12, user_id=1, title="third"),
    ]


def _comments():
    return [
        Comment(id=100, post_id=10, body="c1"),
        Comment(id=101, post_id=12, body="c2"),
        Comment(id=102, post_id=10, body="c3"),
    ]


def test_single_user_scenario():
    alice = User(id=1, name="Alice")
    post = Post(id=10, user_id=1, title="T")
    comment = Comment(id=100, post_id=10, body="B")

    result = aggregate_data([alice], [post], [comment])

    assert result == [
        AggregatedUser(user=alice, posts=[AggregatedPost(post=post, comments=[comment])])
    ]


def test_empty_inputs_give_empty_aggregate():
    assert aggregate_data([], [], []) == []


def test_one_record_per_user_in_input_order():
    users = _users()

    result = aggregate_data(users, _posts(), _comments())

    assert [entry.user for entry in result] == users


def test_children_keep_input_order():
    result = aggregate_data(_users(), _posts(), _comments())

    alice = result[0]
    assert [p.post.id for p in alice.posts] == [10, 12]
    assert [c.id for c in alice.posts[0].comments] == [100, 102]
    assert [c.id for c in alice.posts[1].comments] == [101]


def test_user_without_posts_is_kept_with_empty_list():
    result = aggregate_data(_users(), _posts(), _comments())

    carol = result[2]
    assert carol.user.name == "Carol"
    assert carol.posts == []


def test_post_without_comments_has_empty_list():
    result = aggregate_data(_users(), _posts(), _comments())

    bob = result[1]
    assert bob.posts[0].post.id == 11
    assert bob.posts[0].comments == []


def test_dangling_children_are_dropped():
    posts = _posts() + [Post(id=13, user_id=99)]
    comments = _comments() + [Comment(id=103, post_id=13), Comment(id=104, post_id=500)]

    result = aggregate_data(_users(), posts, comments)

    post_ids = {p.post.id for entry in result for p in entry.posts}
    comment_ids = {c.id for entry in result for p in entry.posts for c in p.comments}
    assert 13 not in post_ids
    assert {103, 104}.isdisjoint(comment_ids)


def test_user_order_only_changes_top_level_order():
    users = _users()
    shuffled = users[:]
    random.Random(4).shuffle(shuffled)

    by_id = {e.user.id: e for e in aggregate_data(users, _posts(), _comments())}
    for entry in aggregate_data(shuffled, _posts(), _comments()):
        assert entry == by_id[entry.user.id]


def test_find_dangling_references():
    posts = _posts() + [Post(id=13, user_id=99)]
    comments = _comments() + [Comment(id=103, post_id=13), Comment(id=104, post_id=500)]

    dangling = find_dangling_references(_users(), posts, comments)

    assert [p.id for p in dangling.orphan_posts] == [13]
    # Comment 103 sits on orphan post 13, so it is dropped too.
    assert [c.id for c in dangling.orphan_comments] == [103, 104]


def test_comments_on_orphan_posts_are_reported():
    users = [User(id=1, name="Alice")]
    posts = [Post(id=13, user_id=99)]
    comments = [Comment(id=103, post_id=13)]

    kept = [c for entry in aggregate_data(users, posts, comments) for p in entry.posts for c in p.comments]
    dangling = find_dangling_references(users, posts, comments)

    assert kept == []
    assert dangling.orphan_comments == comments


def test_dangling_report_matches_what_the_join_drops():
    posts = _posts() + [Post(id=13, user_id=99)]
    comments = _comments() + [Comment(id=103, post_id=13), Comment(id=104, post_id=500)]

    result = aggregate_data(_users(), posts, comments)
    dangling = find_dangling_references(_users(), posts, comments)

    kept_posts = sum(len(entry.posts) for entry in result)
    kept_comments = sum(len(p.comments) for entry in result for p in entry.posts)
    assert kept_posts + len(dangling.orphan_posts) == len(posts)
    assert kept_comments + len(dangling.orphan_comments) == len(comments)


def test_find_dangling_references_clean_input():
    assert find_dangling_references(_users(), _posts(), _comments()).is_empty
