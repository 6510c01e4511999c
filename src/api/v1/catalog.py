"""
API v1 catalog routes - xozmaks, categories and sub-categories.

Listing is open to anonymous callers; writes require a user token.
DELETE is a soft delete: the row stays, flagged inactive.
"""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import (
    get_category_service,
    get_claims,
    get_current_user_id,
    get_sub_category_service,
    get_xozmak_service,
)
from src.api.models import (
    CategoryRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    CreatedResponse,
    ErrorResponse,
    SubCategoryRequest,
    SubCategoryResponse,
    SubCategoryUpdateRequest,
    XozmakRequest,
    XozmakResponse,
    XozmakUpdateRequest,
)
from src.domain.catalog import CategoryService, SubCategoryService, XozmakService
from src.domain.models import Category, SubCategory, Xozmak

router = APIRouter()

WRITE_ERRORS = {
    400: {"model": ErrorResponse, "description": "Referenced entity does not exist"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    404: {"model": ErrorResponse, "description": "Not found or no changes made"},
    409: {"model": ErrorResponse, "description": "Already exists"},
}


# Xozmaks


@router.post(
    "/xozmaks",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    tags=["xozmaks"],
    summary="Create a xozmak",
)
def create_xozmak(
    request_data: XozmakRequest,
    user_id: str = Depends(get_current_user_id),
    service: XozmakService = Depends(get_xozmak_service),
) -> CreatedResponse:
    xozmak = Xozmak(id="", **request_data.model_dump())
    return CreatedResponse(id=service.create_for(user_id, xozmak))


@router.get(
    "/xozmaks",
    response_model=list[XozmakResponse],
    tags=["xozmaks"],
    summary="List active xozmaks",
    dependencies=[Depends(get_claims)],
)
def list_xozmaks(service: XozmakService = Depends(get_xozmak_service)) -> list[XozmakResponse]:
    return [XozmakResponse.model_validate(x) for x in service.list_active()]


@router.put(
    "/xozmaks/{xozmak_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=WRITE_ERRORS,
    tags=["xozmaks"],
    summary="Update a xozmak",
    dependencies=[Depends(get_current_user_id)],
)
def update_xozmak(
    xozmak_id: str,
    request_data: XozmakUpdateRequest,
    service: XozmakService = Depends(get_xozmak_service),
) -> Response:
    service.update(xozmak_id, Xozmak(id=xozmak_id, **request_data.model_dump()))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/xozmaks/{xozmak_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=WRITE_ERRORS,
    tags=["xozmaks"],
    summary="Delete a xozmak",
    dependencies=[Depends(get_current_user_id)],
)
def delete_xozmak(
    xozmak_id: str,
    service: XozmakService = Depends(get_xozmak_service),
) -> Response:
    service.delete(xozmak_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Categories


@router.post(
    "/categories",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    tags=["categories"],
    summary="Create a category",
    dependencies=[Depends(get_current_user_id)],
)
def create_category(
    request_data: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
) -> CreatedResponse:
    return CreatedResponse(id=service.create(Category(id="", **request_data.model_dump())))


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    tags=["categories"],
    summary="List active categories",
    dependencies=[Depends(get_claims)],
)
def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in service.list_active()]


@router.put(
    "/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=WRITE_ERRORS,
    tags=["categories"],
    summary="Update a category",
    dependencies=[Depends(get_current_user_id)],
)
def update_category(
    category_id: str,
    request_data: CategoryUpdateRequest,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    service.update(category_id, Category(id=category_id, **request_data.model_dump()))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=WRITE_ERRORS,
    tags=["categories"],
    summary="Delete a category",
    dependencies=[Depends(get_current_user_id)],
)
def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Sub-categories


@router.post(
    "/sub-categories",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    tags=["sub-categories"],
    summary="Create a sub-category",
    dependencies=[Depends(get_current_user_id)],
)
def create_sub_category(
    request_data: SubCategoryRequest,
    service: SubCategoryService = Depends(get_sub_category_service),
) -> CreatedResponse:
    return CreatedResponse(id=service.create(SubCategory(id="", **request_data.model_dump())))


@router.get(
    "/sub-categories",
    response_model=list[SubCategoryResponse],
    tags=["sub-categories"],
    summary="List active sub-categories",
    dependencies=[Depends(get_claims)],
)
def list_sub_categories(
    service: SubCategoryService = Depends(get_sub_category_service),
) -> list[SubCategoryResponse]:
    return [SubCategoryResponse.model_validate(s) for s in service.list_active()]


@router.put(
    "/sub-categories/{sub_category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=WRITE_ERRORS,
    tags=["sub-categories"],
    summary="Update a sub-category",
    dependencies=[Depends(get_current_user_id)],
)
def update_sub_category(
    sub_category_id: str,
    request_data: SubCategoryUpdateRequest,
    service: SubCategoryService = Depends(get_sub_category_service),
) -> Response:
    service.update(
        sub_category_id, SubCategory(id=sub_category_id, **request_data.model_dump())
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/sub-categories/{sub_category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=WRITE_ERRORS,
    tags=["sub-categories"],
    summary="Delete a sub-category",
    dependencies=[Depends(get_current_user_id)],
)
def delete_sub_category(
    sub_category_id: str,
    service: SubCategoryService = Depends(get_sub_category_service),
) -> Response:
    service.delete(sub_category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
