"""Unit tests for domain models."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from dami.domain.model import ANONYMOUS_LABEL, Comment, Like, parse_tags
from dami.domain.value import ClientId, CommentId, LikeId, Subject
from tests.conftest import make_article, make_comment, make_video


class TestArticle:
    """Tests for Article."""

    def test_tags_from_comma_separated_string(self):
        article = make_article(tags="AI, Machine Learning, ,DevOps ")
        assert article.tags == ["AI", "Machine Learning", "DevOps"]

    def test_tags_from_list_drop_blanks(self):
        article = make_article(tags=[" k8s", "", "  "])
        assert article.tags == ["k8s"]

    def test_defaults(self):
        article = make_article()

        assert article.tags == []
        assert article.reading_time == "5 min read"
        assert article.views == 0

    def test_negative_views_rejected(self):
        with pytest.raises(ValidationError):
            make_article(views=-1)

    def test_parse_tags_none(self):
        assert parse_tags(None) == []


class TestVideo:
    def test_embed_url(self):
        video = make_video()
        assert video.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ"


class TestComment:
    """Tests for Comment."""

    def test_must_have_exactly_one_subject(self):
        with pytest.raises(ValidationError):
            Comment(id=CommentId(uuid4()), body="Hi")
        with pytest.raises(ValidationError):
            Comment(
                id=CommentId(uuid4()),
                body="Hi",
                article_id=uuid4(),
                video_id=uuid4(),
            )

    def test_subject_round_trip(self):
        subject = Subject.video(uuid4())
        comment = make_comment(subject)

        assert comment.subject == subject
        assert comment.article_id is None

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_author_label_falls_back_to_anonymous(self, name):
        comment = make_comment(Subject.article(uuid4()), author_name=name)
        assert comment.author_label == ANONYMOUS_LABEL

    def test_author_label_uses_name(self):
        comment = make_comment(Subject.article(uuid4()), author_name="Dami")
        assert comment.author_label == "Dami"


class TestLike:
    def test_must_have_exactly_one_subject(self):
        with pytest.raises(ValidationError):
            Like(id=LikeId(uuid4()), client_id=ClientId("anon_1"))

    def test_subject(self):
        article_id = uuid4()
        like = Like(
            id=LikeId(uuid4()), client_id=ClientId("anon_1"), article_id=article_id
        )
        assert like.subject == Subject.article(article_id)
