"""Service-level tests for transactional cascades and helpers."""

import pytest
from sqlalchemy import event

from src.exceptions import ConflictError, ListNotFoundError, UserNotFoundError
from src.models import List, Task, User, UserSettings
from src.models.enums import TaskStatus, Theme
from src.schemas.task import TaskUpdate
from src.services.auth import claims_from_token, create_access_token
from src.services.list_service import ListService
from src.services.settings_service import SettingsService
from src.services.task_service import TaskService
from src.services.user_service import UserService


@pytest.fixture
def user(db):
    return UserService(db).create(
        email="owner@example.com", password="password123", first_name="Own", last_name="Er"
    )


def fail_on_delete_of(session, model):
    """Make any ORM DELETE against ``model`` raise inside the session."""

    def listener(orm_execute_state):
        mapper = orm_execute_state.bind_mapper
        if orm_execute_state.is_delete and mapper is not None and mapper.class_ is model:
            raise RuntimeError(f"induced failure deleting {model.__tablename__}")

    event.listen(session, "do_orm_execute", listener)
    return listener


def test_delete_user_is_all_or_nothing(db, user):
    lists = ListService(db)
    tasks = TaskService(db)
    lst = lists.create(user.id, title="Home")
    tasks.create(user.id, task_name="One", list_id=lst.id)
    tasks.create(user.id, task_name="Two")
    SettingsService(db).get_or_create(user.id)

    listener = fail_on_delete_of(db, User)
    try:
        with pytest.raises(RuntimeError):
            UserService(db).delete(user.id)
    finally:
        event.remove(db, "do_orm_execute", listener)

    assert db.query(User).filter(User.id == user.id).count() == 1
    assert db.query(Task).filter(Task.author_id == user.id).count() == 2
    assert db.query(List).filter(List.author_id == user.id).count() == 1
    assert db.query(UserSettings).filter(UserSettings.user_id == user.id).count() == 1


def test_delete_user_removes_everything(db, user):
    ListService(db).create(user.id, title="Home")
    TaskService(db).create(user.id, task_name="One")
    SettingsService(db).get_or_create(user.id)

    UserService(db).delete(user.id)

    assert db.query(User).count() == 0
    assert db.query(Task).count() == 0
    assert db.query(List).count() == 0
    assert db.query(UserSettings).count() == 0


def test_delete_list_is_all_or_nothing(db, user):
    lists = ListService(db)
    lst = lists.create(user.id, title="Work")
    TaskService(db).create(user.id, task_name="Report", list_id=lst.id)

    listener = fail_on_delete_of(db, List)
    try:
        with pytest.raises(RuntimeError):
            lists.delete(user.id, lst.id)
    finally:
        event.remove(db, "do_orm_execute", listener)

    assert db.query(List).filter(List.id == lst.id).count() == 1
    assert db.query(Task).filter(Task.list_id == lst.id).count() == 1


def test_create_user_duplicate_email(db, user):
    with pytest.raises(ConflictError):
        UserService(db).create(
            email=user.email, password="password123", first_name="A", last_name="B"
        )


def test_authenticate(db, user):
    users = UserService(db)
    assert users.authenticate(user.email, "password123").id == user.id
    assert users.authenticate(user.email, "wrong-password") is None
    assert users.authenticate("missing@example.com", "password123") is None


def test_operations_require_existing_user(db):
    with pytest.raises(UserNotFoundError):
        TaskService(db).list_for_user(424242)
    with pytest.raises(UserNotFoundError):
        ListService(db).create(424242, title="Orphan")
    with pytest.raises(UserNotFoundError):
        SettingsService(db).get_or_create(424242)


def test_task_get_returns_none_when_absent(db, user):
    assert TaskService(db).get(user.id, 999) is None


def test_task_create_with_unknown_list(db, user):
    with pytest.raises(ListNotFoundError):
        TaskService(db).create(user.id, task_name="Lost", list_id=999)
    assert db.query(Task).count() == 0


def test_status_toggle_mapping():
    assert TaskStatus.TODO.toggled() is TaskStatus.DONE
    assert TaskStatus.IN_PROGRESS.toggled() is TaskStatus.DONE
    assert TaskStatus.DONE.toggled() is TaskStatus.TODO


def test_task_update_patch_keeps_explicit_nulls_only_where_allowed():
    update = TaskUpdate.model_validate(
        {"id": 3, "listId": None, "status": None, "taskName": "Renamed"}
    )
    assert update.patch() == {"list_id": None, "task_name": "Renamed"}


def test_claims_round_trip():
    token = create_access_token(7, "seven@example.com")
    claims = claims_from_token(token)
    assert claims.user_id == 7
    assert claims.email == "seven@example.com"


def test_claims_reject_garbage():
    assert claims_from_token("garbage") is None


def race_settings_creation(monkeypatch, service, other_db):
    """Have another session create the settings row right after ``service`` looks for it."""
    real_find = service._find
    raced = []

    def find_then_lose_race(user_id):
        if not raced:
            raced.append(user_id)
            SettingsService(other_db).get_or_create(user_id)
            return None
        return real_find(user_id)

    monkeypatch.setattr(service, "_find", find_then_lose_race)


def test_get_or_create_settings_tolerates_concurrent_create(db, other_db, user, monkeypatch):
    service = SettingsService(db)
    race_settings_creation(monkeypatch, service, other_db)

    settings = service.get_or_create(user.id)

    assert settings.user_id == user.id
    assert settings.theme == Theme.LIGHT
    assert db.query(UserSettings).filter(UserSettings.user_id == user.id).count() == 1


def test_update_settings_applies_changes_after_concurrent_create(db, other_db, user, monkeypatch):
    service = SettingsService(db)
    race_settings_creation(monkeypatch, service, other_db)

    settings = service.update(user.id, {"theme": Theme.DARK})

    assert settings.theme == Theme.DARK
    assert db.query(UserSettings).filter(UserSettings.user_id == user.id).count() == 1
