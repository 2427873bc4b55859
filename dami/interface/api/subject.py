"""Path segment naming the kind of content a route acts on."""

from enum import Enum

from dami.domain.value import SubjectType


class SubjectPath(str, Enum):
    """Collection segment of /articles/{id}/... and /videos/{id}/... routes."""

    ARTICLES = "articles"
    VIDEOS = "videos"

    @property
    def subject_type(self) -> SubjectType:
        if self is SubjectPath.ARTICLES:
            return SubjectType.ARTICLE
        return SubjectType.VIDEO
