# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from stockroom.application.services.password_hashing import WerkzeugPasswordHasher
from stockroom.application.services.tokens import SignedTokenService
from stockroom.application.use_cases.products.bulk_products import (
    BulkDeleteProductsUseCase, BulkReplaceProductsUseCase)
from stockroom.application.use_cases.products.create_products import CreateProductsUseCase
from stockroom.application.use_cases.products.delete_product import DeleteProductUseCase
from stockroom.application.use_cases.products.query_products import (
    GetProductUseCase, ListProductsUseCase)
from stockroom.application.use_cases.products.update_product import (
    PatchProductUseCase, ReplaceProductUseCase)
from stockroom.application.use_cases.users.login_user import LoginUserUseCase
from stockroom.application.use_cases.users.query_users import GetUserUseCase, ListUsersUseCase
from stockroom.application.use_cases.users.register_user import RegisterUserUseCase
from stockroom.domain.users.repositories import PasswordHasher
from stockroom.infrastructure.auth import AuthGate
from stockroom.infrastructure.db import Database
from stockroom.infrastructure.repositories.sqlalchemy_product_repository import \
    SqlAlchemyProductRepository
from stockroom.infrastructure.repositories.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from stockroom.interfaces.http.controllers.auth_controller import AuthController
from stockroom.interfaces.http.controllers.misc_controller import MiscController
from stockroom.interfaces.http.controllers.products_controller import ProductsController
from stockroom.interfaces.http.controllers.users_controller import UsersController
from stockroom.shared.config import AppConfig


class Container:
    def __init__(
        self,
        config: AppConfig,
        *,
        database: Database | None = None,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        self._database = database
        self._password_hasher = password_hasher

    @cached_property
    def database(self) -> Database:
        if self._database is not None:
            return self._database
        return Database(self.config.database, production=self.config.is_production())

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher or WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> SignedTokenService:
        return SignedTokenService(self.config.jwt_secret, expires_in=self.config.jwt_expiry)

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.token_service)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository(self.database)

    # Users

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_repository)

    # Products

    @cached_property
    def list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(products=self.product_repository)

    @cached_property
    def get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(products=self.product_repository)

    @cached_property
    def create_products_use_case(self) -> CreateProductsUseCase:
        return CreateProductsUseCase(products=self.product_repository)

    @cached_property
    def replace_product_use_case(self) -> ReplaceProductUseCase:
        return ReplaceProductUseCase(products=self.product_repository)

    @cached_property
    def patch_product_use_case(self) -> PatchProductUseCase:
        return PatchProductUseCase(products=self.product_repository)

    @cached_property
    def delete_product_use_case(self) -> DeleteProductUseCase:
        return DeleteProductUseCase(products=self.product_repository)

    @cached_property
    def bulk_replace_products_use_case(self) -> BulkReplaceProductsUseCase:
        return BulkReplaceProductsUseCase(replace=self.replace_product_use_case)

    @cached_property
    def bulk_delete_products_use_case(self) -> BulkDeleteProductsUseCase:
        return BulkDeleteProductsUseCase(delete=self.delete_product_use_case)

    # Controllers

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(config=self.config, database=self.database)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            database=self.database,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            list_users=self.list_users_use_case,
            get_user=self.get_user_use_case,
            auth=self.auth_gate,
            database=self.database,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(
            list_products=self.list_products_use_case,
            get_product=self.get_product_use_case,
            create_products=self.create_products_use_case,
            replace_product=self.replace_product_use_case,
            patch_product=self.patch_product_use_case,
            delete_product=self.delete_product_use_case,
            bulk_replace=self.bulk_replace_products_use_case,
            bulk_delete=self.bulk_delete_products_use_case,
            auth=self.auth_gate,
            database=self.database,
        )

    def controllers(self) -> list:
        return [
            self.misc_controller,
            self.auth_controller,
            self.users_controller,
            self.products_controller,
        ]
