"""Article routes: public catalog and admin management."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status

from dami.application.usecase.admin import GetCurrentAdminUseCase
from dami.application.usecase.article import (
    ArticleChanges,
    ArticleFields,
    ArticleResponse,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    ListArticleCategoriesUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from dami.config import Settings
from dami.interface.api.auth import require_admin

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)
admin_router = APIRouter(
    prefix="/admin/articles", tags=["admin"], route_class=DishkaRoute
)


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    category: str | None = None,
) -> ListArticlesResponse:
    """List articles, newest first.

    Args:
        list_articles_use_case: List articles use case from DI
        category: Optional category filter ("All" means no filter)
    """
    return await list_articles_use_case.execute(ListArticlesRequest(category=category))


@router.get("/featured", response_model=ListArticlesResponse)
async def featured_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
) -> ListArticlesResponse:
    """The latest articles, for the home page."""
    return await list_articles_use_case.execute(ListArticlesRequest(featured=True))


@router.get("/categories", response_model=list[str])
async def article_categories(
    list_categories_use_case: FromDishka[ListArticleCategoriesUseCase],
) -> list[str]:
    """Category filter values, starting with "All"."""
    return await list_categories_use_case.execute()


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    get_article_use_case: FromDishka[GetArticleUseCase],
) -> ArticleResponse:
    """Read an article. Every read counts as one view.

    Raises:
        NotFoundError: If the article does not exist (404)
    """
    return await get_article_use_case.execute(GetArticleRequest(article_id=article_id))


@admin_router.get("", response_model=ListArticlesResponse)
async def admin_list_articles(
    request: Request,
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> ListArticlesResponse:
    """List every article for the admin table."""
    await require_admin(request, get_current_admin_use_case, settings)
    return await list_articles_use_case.execute(ListArticlesRequest())


@admin_router.post(
    "", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED
)
async def create_article(
    request: Request,
    fields: ArticleFields,
    create_article_use_case: FromDishka[CreateArticleUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> ArticleResponse:
    """Publish a new article.

    Raises:
        ValidationError: If the category is unknown (400)
    """
    await require_admin(request, get_current_admin_use_case, settings)
    return await create_article_use_case.execute(fields)


@admin_router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    request: Request,
    article_id: str,
    changes: ArticleChanges,
    update_article_use_case: FromDishka[UpdateArticleUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> ArticleResponse:
    """Edit an article. Omitted fields are left unchanged."""
    await require_admin(request, get_current_admin_use_case, settings)
    return await update_article_use_case.execute(
        UpdateArticleRequest(article_id=article_id, changes=changes)
    )


@admin_router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    request: Request,
    article_id: str,
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> Response:
    """Delete an article with its comments and likes."""
    await require_admin(request, get_current_admin_use_case, settings)
    await delete_article_use_case.execute(DeleteArticleRequest(article_id=article_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
