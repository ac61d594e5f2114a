from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from jobnet.models.post import Post, PostComment
from jobnet.services.conversation import conversation_id, other_participant, participants
from jobnet.services.job_analysis import analyze_job_description, application_suggestions
from jobnet.services.post_service import (
    add_share,
    engagement_score,
    toggle_comment_like,
    toggle_post_like,
    trending,
)
from jobnet.services.profile_service import merge_skills


def test_conversation_id_is_order_independent() -> None:
    assert conversation_id(2, 10) == conversation_id(10, 2) == "10_2"
    assert conversation_id("a", "b") == "a_b"


def test_conversation_participants() -> None:
    assert participants("10_2") == ("10", "2")
    assert other_participant("10_2", 2) == "10"
    assert other_participant("10_2", "10") == "2"
    with pytest.raises(ValueError):
        participants("nounderscore")


def test_merge_skills_appends_new_case_insensitively() -> None:
    assert merge_skills(["Python"], ["python", " SQL ", "", "sql"]) == ["Python", "SQL"]
    assert merge_skills(None, ["Go"]) == ["Go"]
    assert merge_skills(["Go"], None) == ["Go"]


def test_analyze_senior_remote_description() -> None:
    analysis = analyze_job_description(
        "Senior engineer, remote, competitive salary. Team player with strong experience."
    )
    assert analysis.experience_level == "senior"
    assert analysis.remote_friendly is True
    assert analysis.salary_indication == "high"
    assert analysis.key_requirements == ["Strong experience in relevant technologies"]
    assert analysis.company_culture == ["Team-oriented"]


def test_analyze_junior_description() -> None:
    analysis = analyze_job_description("Entry level junior role at a startup")
    assert analysis.experience_level == "junior"
    assert analysis.salary_indication == "low"
    assert analysis.remote_friendly is False
    assert analysis.company_culture == ["Fast-paced environment"]


def test_application_suggestions_highlight_first_three_skills() -> None:
    suggestions = application_suggestions(["Python", "SQL", "Docker", "Go"])
    assert suggestions["skill_highlights"] == ["Python", "SQL", "Docker"]
    assert suggestions["red_flags"] == []
    assert application_suggestions(None)["skill_highlights"] == []


def test_post_like_toggles() -> None:
    post = Post(content="hello")
    assert toggle_post_like(post, 1) is True
    assert [like.user_id for like in post.likes] == [1]
    assert toggle_post_like(post, 1) is False
    assert post.likes == []


def test_comment_like_toggles() -> None:
    comment = PostComment(user_id=2, content="nice")
    assert toggle_comment_like(comment, 1) is True
    assert len(comment.likes) == 1
    assert toggle_comment_like(comment, 1) is False
    assert comment.likes == []


def test_share_is_recorded_once() -> None:
    post = Post(content="hello")
    assert add_share(post, 1) is True
    assert add_share(post, 1) is False
    assert len(post.shares) == 1


def test_trending_orders_by_weighted_score_then_recency() -> None:
    now = datetime(2024, 1, 1)
    liked = Post(id=1, content="a", created_at=now - timedelta(days=2))
    for user_id in (1, 2, 3):
        toggle_post_like(liked, user_id)
    shared = Post(id=2, content="b", created_at=now - timedelta(days=1))
    add_share(shared, 1)
    quiet = Post(id=3, content="c", created_at=now)

    assert engagement_score(liked) == 3
    assert engagement_score(shared) == 3
    # Equal scores fall back to the newer post first.
    assert [p.id for p in trending([liked, shared, quiet], 10)] == [2, 1, 3]
    assert [p.id for p in trending([liked, shared, quiet], 1)] == [2]
