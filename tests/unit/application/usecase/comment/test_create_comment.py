"""Unit tests for CreateCommentUseCase and DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from dami.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from dami.domain.error import NotFoundError, ValidationError
from dami.domain.repository import ArticleRepository, VideoRepository
from dami.domain.value import SubjectType
from tests.conftest import make_article, make_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_then_reply_on_video(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        video = await (await unit_env.get(VideoRepository)).save(make_video())

        top = await create_comment.execute(
            CreateCommentRequest(
                subject_type=SubjectType.VIDEO,
                subject_id=str(video.id),
                body="Loved this one",
            )
        )
        reply = await create_comment.execute(
            CreateCommentRequest(
                subject_type=SubjectType.VIDEO,
                subject_id=str(video.id),
                body="Same here",
                author_name="Tunde",
                parent_id=top.comment_id,
            )
        )

        assert top.parent_id is None
        assert top.author_label == "Anonymous"
        assert top.subject_type == SubjectType.VIDEO
        assert reply.parent_id == top.comment_id
        assert reply.author_label == "Tunde"

        thread = await get_comments.execute(
            GetCommentsRequest(subject_type=SubjectType.VIDEO, subject_id=str(video.id))
        )
        assert thread.total == 2
        assert thread.comments[0].replies[0].comment_id == reply.comment_id

    @pytest.mark.asyncio
    async def test_comment_on_missing_article_raises(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await create_comment.execute(
                CreateCommentRequest(
                    subject_type=SubjectType.ARTICLE,
                    subject_id=str(uuid4()),
                    body="Hello",
                )
            )

    @pytest.mark.asyncio
    async def test_empty_body_rejected(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())

        with pytest.raises(ValidationError):
            await create_comment.execute(
                CreateCommentRequest(
                    subject_type=SubjectType.ARTICLE,
                    subject_id=str(article.id),
                    body="   ",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id_rejected(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())

        with pytest.raises(ValueError, match="Parent comment not found"):
            await create_comment.execute(
                CreateCommentRequest(
                    subject_type=SubjectType.ARTICLE,
                    subject_id=str(article.id),
                    body="Reply",
                    parent_id="not-a-uuid",
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_comment(self, unit_env):
        create_comment = await unit_env.get(CreateCommentUseCase)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())

        created = await create_comment.execute(
            CreateCommentRequest(
                subject_type=SubjectType.ARTICLE,
                subject_id=str(article.id),
                body="Spam",
            )
        )
        await delete_comment.execute(DeleteCommentRequest(comment_id=created.comment_id))

        thread = await get_comments.execute(
            GetCommentsRequest(
                subject_type=SubjectType.ARTICLE, subject_id=str(article.id)
            )
        )
        assert thread.total == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment_id", ["nope", "00000000-0000-0000-0000-000000000000"])
    async def test_delete_unknown_comment_raises(self, unit_env, comment_id):
        delete_comment = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await delete_comment.execute(DeleteCommentRequest(comment_id=comment_id))
