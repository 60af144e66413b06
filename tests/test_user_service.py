"""Tests for UserService registration."""

import bcrypt
import pytest

from wallet_app.modules.common.exceptions import ConstraintViolationError
from wallet_app.modules.users import UserAlreadyExistsError, UserCreateInput
from wallet_app.modules.users.service import UserService


@pytest.fixture
def service(user_repository):
    return UserService(user_repository, bcrypt_rounds=4)


class TestRegister:
    async def test_password_is_hashed(self, service):
        user = await service.register(UserCreateInput(name="Teste", email="teste@teste.com", password="senha123"))

        assert user.id is not None
        assert user.password_hash != "senha123"
        assert bcrypt.checkpw(b"senha123", user.password_hash.encode("utf-8"))

    async def test_duplicate_email(self, service):
        payload = UserCreateInput(name="Teste", email="teste@teste.com", password="senha123")
        await service.register(payload)

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await service.register(payload)

        assert isinstance(exc_info.value, ConstraintViolationError)
        assert exc_info.value.email == "teste@teste.com"

    async def test_lookup(self, service):
        user = await service.register(UserCreateInput(name="Teste", email="teste@teste.com", password="senha123"))

        assert (await service.find_by_email("teste@teste.com")).id == user.id
        assert (await service.get_by_id(user.id)).email == "teste@teste.com"
        assert await service.find_by_email("outro@teste.com") is None
