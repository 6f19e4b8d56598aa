"""Product API views.

Five handlers, each following the same shape: parse the request, validate
it, delegate to the injected ``IProductRepository`` and map the outcome to
a status code.

Error mapping:

- ``ProductValidationError`` / ``InvalidIdentifier`` / bad body -> 400.
- ``ProductNotFound`` -> 404.
- any other ``RepositoryError`` -> 500 (404 when listing).

The view never swallows generic exceptions; they surface as 500.
"""

from __future__ import annotations

import re
from typing import Any, Optional

import structlog
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.identifiers import InvalidIdentifier, parse_id
from modules.products.dtos import CreateProductInput, UpdateProductInput
from modules.products.entities import Product
from modules.products.exceptions import (
    ProductNotFound,
    ProductValidationError,
    RepositoryError,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.serializers import ProductSerializer

logger = structlog.get_logger(__name__)

DEFAULT_SORT = "desc"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _parse_int(value: Optional[str]) -> int:
    """Query-string integer; anything unparsable counts as zero.

    Only plain ASCII decimal text within the signed 64-bit range parses.
    """
    if value is None or not _INT_PATTERN.fullmatch(value):
        return 0
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return 0
    return number


def _error(detail: str, status_code: int, **extra: Any) -> Response:
    return Response({"detail": detail, **extra}, status=status_code)


class ProductViewSet(ViewSet):
    """CRUD handlers for the Product resource.

    The repository is injected once per view via ``as_view(...,
    repository=repo)`` and defaults to ``ProductDjangoRepository``.  The
    view keeps no other state.
    """

    parser_classes = [JSONParser]
    repository: Optional[IProductRepository] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.repository is None:
            self.repository = ProductDjangoRepository()

    def handle_exception(self, exc: Exception) -> Response:
        # Undecodable bodies are reported as 400, not 415.
        if isinstance(exc, UnsupportedMediaType):
            exc = ParseError(exc.detail)
        return super().handle_exception(exc)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create Product",
        request=CreateProductInput,
        responses={201: None, 400: OpenApiTypes.OBJECT, 500: OpenApiTypes.OBJECT},
    )
    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        if not request.data:
            return _error("request body is required", status.HTTP_400_BAD_REQUEST)

        try:
            data = CreateProductInput.model_validate(request.data)
        except PydanticValidationError as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = Product.new(data.name, data.price)
        except ProductValidationError as exc:
            logger.warning("product.invalid", kind=str(exc.kind))
            return _error(str(exc), status.HTTP_400_BAD_REQUEST, code=exc.kind)

        try:
            self.repository.create(product)
        except RepositoryError as exc:
            logger.error(
                "product.create_failed", product_id=str(product.id), error=str(exc)
            )
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("product.created", product_id=str(product.id))
        return Response(status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @extend_schema(
        summary="List Product by ID",
        responses={
            200: ProductSerializer,
            400: OpenApiTypes.OBJECT,
            404: OpenApiTypes.OBJECT,
        },
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        if not pk:
            return _error("id is required", status.HTTP_400_BAD_REQUEST)

        try:
            product = self.repository.find_by_id(pk)
        except ProductNotFound:
            return _error("Product not found.", status.HTTP_404_NOT_FOUND)
        except RepositoryError as exc:
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="List All Products",
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT, description="page number"),
            OpenApiParameter("limit", OpenApiTypes.INT, description="limit number"),
            OpenApiParameter("sort", OpenApiTypes.STR, description="asc or desc"),
        ],
        responses={200: ProductSerializer(many=True), 404: OpenApiTypes.OBJECT},
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products?page=&limit=&sort="""
        page = _parse_int(request.query_params.get("page"))
        limit = _parse_int(request.query_params.get("limit"))
        sort = request.query_params.get("sort") or DEFAULT_SORT

        try:
            products = self.repository.find_all(page, limit, sort)
        except RepositoryError as exc:
            logger.warning("product.list_failed", error=str(exc))
            return _error(str(exc), status.HTTP_404_NOT_FOUND)

        serializer = ProductSerializer(products, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    # ------------------------------------------------------------------
    # Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Update Product by ID",
        request=UpdateProductInput,
        responses={
            200: None,
            400: OpenApiTypes.OBJECT,
            404: OpenApiTypes.OBJECT,
            500: OpenApiTypes.OBJECT,
        },
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}"""
        if not pk:
            return _error("id is required", status.HTTP_400_BAD_REQUEST)

        if not request.data:
            return _error("request body is required", status.HTTP_400_BAD_REQUEST)

        try:
            data = UpdateProductInput.model_validate(request.data)
        except PydanticValidationError as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product_id = parse_id(pk)
        except InvalidIdentifier as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            existing = self.repository.find_by_id(pk)
        except ProductNotFound:
            return _error("Product not found.", status.HTTP_404_NOT_FOUND)
        except RepositoryError as exc:
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        product = Product(
            id=product_id,
            name=data.name,
            price=data.price,
            created_at=existing.created_at,
        )
        try:
            self.repository.update(product)
        except RepositoryError as exc:
            logger.error("product.update_failed", product_id=pk, error=str(exc))
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("product.updated", product_id=pk)
        return Response(status=status.HTTP_200_OK)

    @extend_schema(
        summary="Delete Product by ID",
        responses={
            200: None,
            400: OpenApiTypes.OBJECT,
            404: OpenApiTypes.OBJECT,
            500: OpenApiTypes.OBJECT,
        },
    )
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        if not pk:
            return _error("id is required", status.HTTP_400_BAD_REQUEST)

        try:
            product = self.repository.find_by_id(pk)
        except ProductNotFound:
            return _error("Product not found.", status.HTTP_404_NOT_FOUND)
        except RepositoryError as exc:
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        try:
            self.repository.delete(product)
        except RepositoryError as exc:
            logger.error("product.delete_failed", product_id=pk, error=str(exc))
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("product.deleted", product_id=pk)
        return Response(status=status.HTTP_200_OK)
