# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    BlogMutationDep,
    BlogQueryDep,
    BlogRepoDep,
    BlogSearchDep,
    CategoryRepoDep,
    CurrentUserDep,
    SessionDep,
    ValidCategoryDep,
    get_blog_mutation_service,
    get_blog_query_service,
    get_blog_repository,
    get_blog_search_query,
    get_category_repository,
    get_current_user,
    validate_category_create,
)

__all__ = [
    "BlogMutationDep",
    "BlogQueryDep",
    "BlogRepoDep",
    "BlogSearchDep",
    "CategoryRepoDep",
    "CurrentUserDep",
    "SessionDep",
    "ValidCategoryDep",
    "get_blog_mutation_service",
    "get_blog_query_service",
    "get_blog_repository",
    "get_blog_search_query",
    "get_category_repository",
    "get_current_user",
    "validate_category_create",
]
