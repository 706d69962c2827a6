# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from stockroom.application.use_cases.products.bulk_products import (
    BulkDeleteProductsUseCase, BulkReplaceProductsUseCase, ItemFailure)
from stockroom.application.use_cases.products.create_products import CreateProductsUseCase
from stockroom.application.use_cases.products.delete_product import DeleteProductUseCase
from stockroom.application.use_cases.products.query_products import (
    GetProductUseCase, ListProductsUseCase)
from stockroom.application.use_cases.products.update_product import (
    PatchProductUseCase, ReplaceProductUseCase)
from stockroom.infrastructure.auth import AuthGate, current_identity
from stockroom.infrastructure.db import Database
from stockroom.interfaces.http.dto.products import (PRODUCT_SPEC_LIST, BulkDeleteDTO,
                                                    ProductDTO, ProductPatchDTO,
                                                    ProductRecordDTO, ProductSpecDTO)
from stockroom.shared.errors import ValidationError
from stockroom.shared.errors.validation import format_pydantic_errors, raise_validation_error
from stockroom.shared.logging import logger


def _json_list(message: str) -> list:
    payload = request.get_json(silent=True)
    if not isinstance(payload, list):
        raise ValidationError(message)
    return payload


def _json_object() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


class ProductsController:
    def __init__(
        self,
        *,
        list_products: ListProductsUseCase,
        get_product: GetProductUseCase,
        create_products: CreateProductsUseCase,
        replace_product: ReplaceProductUseCase,
        patch_product: PatchProductUseCase,
        delete_product: DeleteProductUseCase,
        bulk_replace: BulkReplaceProductsUseCase,
        bulk_delete: BulkDeleteProductsUseCase,
        auth: AuthGate,
        database: Database,
    ) -> None:
        self._list_products = list_products
        self._get_product = get_product
        self._create_products = create_products
        self._replace_product = replace_product
        self._patch_product = patch_product
        self._delete_product = delete_product
        self._bulk_replace = bulk_replace
        self._bulk_delete = bulk_delete
        self._auth = auth
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__)
        bp.add_url_rule("/products", view_func=self._protect(self.list_products), methods=["GET"])
        bp.add_url_rule("/products", view_func=self._protect(self.create), methods=["POST"])
        bp.add_url_rule("/products", view_func=self._protect(self.bulk_replace), methods=["PUT"])
        bp.add_url_rule(
            "/products", view_func=self._protect(self.bulk_delete), methods=["DELETE"]
        )
        bp.add_url_rule(
            "/product/<int:product_id>", view_func=self._protect(self.get), methods=["GET"]
        )
        bp.add_url_rule(
            "/product/<int:product_id>", view_func=self._protect(self.replace), methods=["PUT"]
        )
        bp.add_url_rule(
            "/product/<int:product_id>", view_func=self._protect(self.patch), methods=["PATCH"]
        )
        bp.add_url_rule(
            "/product/<int:product_id>", view_func=self._protect(self.delete), methods=["DELETE"]
        )
        return bp

    def _protect(self, view):
        return self._database.requires_ready(self._auth.required(view))

    def list_products(self):
        items = self._list_products.execute()
        return jsonify([ProductDTO.dump(product) for product in items])

    def get(self, product_id: int):
        return jsonify(ProductDTO.dump(self._get_product.execute(product_id)))

    def create(self):
        t0 = perf_counter()
        payload = _json_list("Request body must be an array of products")
        try:
            specs = PRODUCT_SPEC_LIST.validate_python(payload)
        except PydanticValidationError as exc:
            raise_validation_error(exc, "Every product needs product_name, quantity and price")

        created = self._create_products.execute([spec.to_draft() for spec in specs])

        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"products.create: ok (user_id={current_identity().id}, n={len(created)}, "
            f"dt_ms={dt:.0f})"
        )
        return jsonify([ProductDTO.dump(product) for product in created]), 201

    def replace(self, product_id: int):
        try:
            spec = ProductSpecDTO.model_validate(_json_object())
        except PydanticValidationError as exc:
            raise_validation_error(exc, "product_name, quantity and price are required")

        updated = self._replace_product.execute(product_id, spec.to_draft())
        logger.info(f"products.replace: ok (product_id={product_id})")
        return jsonify(ProductDTO.dump(updated))

    def patch(self, product_id: int):
        try:
            dto = ProductPatchDTO.model_validate(_json_object())
        except PydanticValidationError as exc:
            raise_validation_error(exc)

        changes = dto.changes()
        updated = self._patch_product.execute(product_id, changes)
        logger.info(f"products.patch: ok (product_id={product_id}, fields={sorted(changes)})")
        return jsonify(ProductDTO.dump(updated))

    def delete(self, product_id: int):
        deleted = self._delete_product.execute(product_id)
        logger.info(f"products.delete: ok (product_id={product_id})")
        return jsonify(
            {"message": "Product deleted successfully", "product": ProductDTO.dump(deleted)}
        )

    def bulk_replace(self):
        payload = _json_list("Request body must be an array of product records")
        if not payload:
            raise ValidationError("Request body must contain at least one product")

        accepted = []
        rejected: list[ItemFailure] = []
        for item in payload:
            try:
                record = ProductRecordDTO.model_validate(item)
            except PydanticValidationError as exc:
                raw_id = item.get("product_id") if isinstance(item, dict) else None
                rejected.append(
                    ItemFailure(
                        product_id=raw_id if isinstance(raw_id, int) else None,
                        error="VALIDATION_ERROR",
                        message=", ".join(format_pydantic_errors(exc)["fields"]) or "invalid item",
                    )
                )
                continue
            accepted.append((record.product_id, record.to_draft()))

        result = self._bulk_replace.execute(accepted, rejected)
        logger.info(
            f"products.bulk_replace: done (updated={len(result.updated)}, "
            f"failed={len(result.failed)})"
        )
        return jsonify(
            {
                "message": f"Updated {len(result.updated)} of {len(payload)} products",
                "updated": [ProductDTO.dump(product) for product in result.updated],
                "failed": [
                    {"product_id": f.product_id, "error": f.error, "message": f.message}
                    for f in result.failed
                ],
            }
        )

    def bulk_delete(self):
        try:
            dto = BulkDeleteDTO.model_validate(_json_object())
        except PydanticValidationError as exc:
            raise_validation_error(exc, "Request body must be {\"ids\": [...]} with at least one id")

        result = self._bulk_delete.execute(dto.ids)
        logger.info(
            f"products.bulk_delete: done (deleted={len(result.deleted)}, "
            f"not_found={len(result.not_found)})"
        )
        return jsonify(
            {
                "message": f"Deleted {len(result.deleted)} products",
                "deleted": [ProductDTO.dump(product) for product in result.deleted],
                "not_found": result.not_found,
            }
        )
