"""Unit tests for GetCommentsUseCase."""

from uuid import uuid4

import pytest

from dami.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from dami.application.usecase.comment.get_comments import CommentNodeResponse
from dami.config import CommentSettings
from dami.domain.error import NotFoundError
from dami.domain.repository import ArticleRepository, CommentRepository, VideoRepository
from dami.domain.service import ArticleService, CommentService, VideoService
from dami.domain.value import Subject, SubjectType
from dami.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_article, make_comment, make_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class UnavailableCommentRepository(InMemoryCommentRepository):
    """Comment store that fails every read."""

    async def fetch_approved_for(self, subject):
        raise ConnectionError("database unavailable")


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_renders_nested_thread(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())
        comment_repo = await unit_env.get(CommentRepository)
        subject = Subject.article(article.id)

        root = make_comment(subject, minutes=0, author_name="Ada")
        reply = make_comment(subject, minutes=5, parent=root)
        newer = make_comment(subject, minutes=10, body="Second thread")
        for comment in (reply, newer, root):
            await comment_repo.insert(comment)

        # Act
        response = await use_case.execute(
            GetCommentsRequest(
                subject_type=SubjectType.ARTICLE, subject_id=str(article.id)
            )
        )

        # Assert
        assert response.total == 3
        assert response.root_count == 2
        assert response.degraded is False
        assert [c.comment_id for c in response.comments] == [
            str(newer.id),
            str(root.id),
        ]

        rendered_root = response.comments[1]
        assert rendered_root.author_label == "Ada"
        assert rendered_root.depth == 0
        assert rendered_root.reply_count == 1
        assert rendered_root.created_at_display == "Jan 1, 2024, 12:00 AM"

        rendered_reply = rendered_root.replies[0]
        assert rendered_reply.comment_id == str(reply.id)
        assert rendered_reply.parent_id == str(root.id)
        assert rendered_reply.author_label == "Anonymous"
        assert rendered_reply.depth == 1

    @pytest.mark.asyncio
    async def test_reply_count_hidden_in_deep_threads(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        video = await (await unit_env.get(VideoRepository)).save(make_video())
        comment_repo = await unit_env.get(CommentRepository)
        subject = Subject.video(video.id)

        chain = [make_comment(subject, minutes=0)]
        for minute in range(1, 5):
            chain.append(make_comment(subject, minutes=minute, parent=chain[-1]))
        for comment in chain:
            await comment_repo.insert(comment)

        response = await use_case.execute(
            GetCommentsRequest(subject_type=SubjectType.VIDEO, subject_id=str(video.id))
        )

        node = response.comments[0]
        reply_counts = []
        while True:
            reply_counts.append((node.depth, node.reply_count))
            if not node.replies:
                break
            node = node.replies[0]
        assert reply_counts == [(0, 1), (1, 1), (2, 1), (3, None), (4, None)]

    @pytest.mark.asyncio
    async def test_missing_subject_raises(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCommentsRequest(
                    subject_type=SubjectType.ARTICLE, subject_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_subject_id_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCommentsRequest(subject_type=SubjectType.VIDEO, subject_id="abc")
            )

    @pytest.mark.asyncio
    async def test_store_failure_degrades_to_empty_thread(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        video_service = await unit_env.get(VideoService)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())
        settings = CommentSettings()
        use_case = GetCommentsUseCase(
            comment_service=CommentService(
                comment_repository=UnavailableCommentRepository(),
                comment_settings=settings,
            ),
            article_service=article_service,
            video_service=video_service,
            comment_settings=settings,
        )

        response = await use_case.execute(
            GetCommentsRequest(
                subject_type=SubjectType.ARTICLE, subject_id=str(article.id)
            )
        )

        assert response.degraded is True
        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_very_deep_thread_renders(self, unit_env):
        """A reply chain deeper than the interpreter's recursion limit still renders."""
        use_case = await unit_env.get(GetCommentsUseCase)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())
        comment_repo = await unit_env.get(CommentRepository)
        subject = Subject.article(article.id)

        depth = 1500
        chain = [make_comment(subject, minutes=0)]
        for minute in range(1, depth):
            chain.append(make_comment(subject, minutes=minute, parent=chain[-1]))
        for comment in chain:
            await comment_repo.insert(comment)

        response = await use_case.execute(
            GetCommentsRequest(
                subject_type=SubjectType.ARTICLE, subject_id=str(article.id)
            )
        )

        assert response.degraded is False
        assert response.total == depth
        assert response.root_count == 1
        node = response.comments[0]
        while node.replies:
            node = node.replies[0]
        assert node.comment_id == str(chain[-1].id)
        assert node.depth == depth - 1
        assert node.reply_count is None

    @pytest.mark.asyncio
    async def test_render_failure_degrades_to_empty_thread(self, unit_env, monkeypatch):
        use_case = await unit_env.get(GetCommentsUseCase)
        article = await (await unit_env.get(ArticleRepository)).save(make_article())
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.insert(make_comment(Subject.article(article.id)))

        def broken_render(roots, max_depth):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(CommentNodeResponse, "from_tree", broken_render)

        response = await use_case.execute(
            GetCommentsRequest(
                subject_type=SubjectType.ARTICLE, subject_id=str(article.id)
            )
        )

        assert response.degraded is True
        assert response.comments == []
        assert response.total == 0
        assert response.root_count == 0
