import pytest
from sqlalchemy.exc import OperationalError

from app.application.services import gate_service, user_service
from app.core.exceptions import BadRequestException, ConflictException, InternalError
from app.domain.models.gate_action import GateAction
from app.domain.models.user import User
from app.domain.schemas.auth import TokenClaims, UserCreate
from app.infrastructure.repositories.gate_action_repository import SQLAlchemyGateActionRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.infrastructure.security import PasswordHasher

hasher = PasswordHasher(rounds=4)


def new_user(**overrides):
    values = {
        "nome": "Carlos",
        "email": "carlos@safegate.com",
        "senha": "segredo",
        "cpf": "11122233344",
        "telefone": "65911112222",
        "tipo_usuario": "cliente",
    }
    values.update(overrides)
    return UserCreate(**values)


@pytest.fixture
def session(database):
    with database.session() as db:
        yield db


@pytest.fixture
def users(session):
    return SQLAlchemyUserRepository(session, User)


def test_register_conflict_leaves_session_usable(users):
    user_service.register_user(users, hasher, new_user())
    with pytest.raises(ConflictException):
        user_service.register_user(users, hasher, new_user(cpf="55566677788"))

    assert users.get_by_email("carlos@safegate.com").cpf == "11122233344"


class BrokenRepository:
    def create(self, data):
        raise OperationalError("INSERT", {}, Exception("database is gone"))


def test_register_persistence_failure_is_internal_error():
    with pytest.raises(InternalError):
        user_service.register_user(BrokenRepository(), hasher, new_user())


def test_register_rejects_role_before_hashing():
    class Untouchable:
        def hash(self, password):
            raise AssertionError("must not hash")

    with pytest.raises(BadRequestException):
        user_service.register_user(BrokenRepository(), Untouchable(), new_user(tipo_usuario="root"))


def test_ensure_default_admin_creates_once(users):
    first = user_service.ensure_default_admin(users, hasher, "admin@safegate.com", "admin123")
    second = user_service.ensure_default_admin(users, hasher, "admin@safegate.com", "admin123")

    assert first.id == second.id
    assert first.tipo_usuario == "admin"
    assert hasher.verify("admin123", first.senha_hash)


def test_ensure_default_admin_needs_both_values(users):
    assert user_service.ensure_default_admin(users, hasher, "admin@safegate.com", None) is None
    assert users.get_by_email("admin@safegate.com") is None


def test_empty_description_falls_back_to_default(session, users):
    user = user_service.register_user(users, hasher, new_user())
    repo = SQLAlchemyGateActionRepository(session, GateAction)
    claims = TokenClaims(id=user.id, email=user.email, tipo_usuario=user.tipo_usuario)

    result = gate_service.submit_action(repo, claims, "parar", "")

    assert repo.get_by_id(result.id).descricao == "Portão parar"


def test_ensure_default_admin_uses_configured_cpf(users):
    admin = user_service.ensure_default_admin(
        users, hasher, "admin@safegate.com", "admin123", cpf="98765432100"
    )

    assert admin.cpf == "98765432100"


def test_ensure_default_admin_skips_taken_cpf(users):
    user_service.register_user(users, hasher, new_user(cpf="00000000000"))

    result = user_service.ensure_default_admin(users, hasher, "admin@safegate.com", "admin123")

    assert result is None
    assert users.get_by_email("admin@safegate.com") is None
    assert users.get_by_email("carlos@safegate.com") is not None
