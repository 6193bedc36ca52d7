from datetime import date, datetime, timedelta, UTC

import pytest

from taskboard.db import schemas
from taskboard.db.models.enums import EntityStatus, Priority, TaskStatus
from taskboard.errors import NotFound, ValidationFailure
from taskboard.services import EntityFilters, TaskFilters


def _task(title, **kw):
    return schemas.TaskCreate(title=title, **kw)


# Users

def test_user_create_and_lookup(managers, user_factory):
    ann = user_factory("ann@example.com", name="Ann")
    assert managers.users.get_by_id(ann.id).name == "Ann"
    assert managers.users.get_by_email("ANN@example.com").id == ann.id


def test_user_get_unknown_id_raises_not_found(managers):
    with pytest.raises(NotFound) as excinfo:
        managers.users.get_by_id(7)
    assert excinfo.value.message == "User not found with id: 7"


def test_user_email_must_be_unique_and_valid(managers, user_factory):
    user_factory("ann@example.com")
    with pytest.raises(ValidationFailure) as excinfo:
        user_factory("Ann@Example.com")
    assert excinfo.value.field == "email"
    with pytest.raises(ValidationFailure):
        user_factory("not-an-email")
    assert len(managers.users.get_all()) == 1


def test_user_update_keeps_own_email(managers, user_factory):
    ann = user_factory("ann@example.com", name="Ann")
    updated = managers.users.update(ann.id, schemas.UserUpdate(name="Ann B", email="ann@example.com"))
    assert updated.name == "Ann B"
    assert updated.created_at == ann.created_at


# Projects

def test_project_create_resolves_creator(managers, user_factory, project_factory):
    ann = user_factory("ann@example.com")
    project = project_factory("Launch", created_by=ann.id)
    assert project.created_by_id == ann.id
    assert project.created_by.email == "ann@example.com"
    assert [p.id for p in managers.projects.get_by_user(ann.id)] == [project.id]


def test_project_create_with_unknown_creator_writes_nothing(managers, project_factory):
    with pytest.raises(NotFound):
        project_factory("Orphan", created_by=999)
    assert managers.projects.get_all() == []


def test_project_update_keeps_creator(managers, user_factory, project_factory):
    ann = user_factory("ann@example.com")
    project = project_factory("Launch", created_by=ann.id)
    updated = managers.projects.update(project.id, schemas.ProjectUpdate(name="Relaunch", description="v2"))
    assert updated.name == "Relaunch"
    assert updated.description == "v2"
    assert updated.created_by_id == ann.id


def test_project_search_is_case_insensitive(managers, project_factory):
    project_factory("Website", description="Marketing site")
    project_factory("Mobile app")
    assert [p.name for p in managers.projects.search("MARKET")] == ["Website"]


# Tasks

def test_task_create_defaults(managers):
    task = managers.tasks.create(_task("Write docs"))
    assert task.status == TaskStatus.TODO.value
    assert task.priority == Priority.MEDIUM.value
    assert task.assigned_to is None
    assert task.project is None


def test_task_with_unknown_project_leaves_no_row(managers):
    with pytest.raises(NotFound) as excinfo:
        managers.tasks.create(_task("Ship", project=schemas.Ref(id=999)))
    assert excinfo.value.message == "Project not found with id: 999"
    assert managers.tasks.get_all() == []


def test_task_update_replaces_references(managers, user_factory, project_factory):
    ann = user_factory("ann@example.com")
    project = project_factory("Launch")
    task = managers.tasks.create(
        _task("Ship", assigned_to=schemas.Ref(id=ann.id), project=schemas.Ref(id=project.id))
    )
    assert task.assigned_to.id == ann.id

    updated = managers.tasks.update(task.id, schemas.TaskUpdate(title="Ship it", status=TaskStatus.DONE))
    assert updated.id == task.id
    assert updated.title == "Ship it"
    assert updated.status == "DONE"
    assert updated.assigned_to_id is None
    assert updated.project_id is None
    assert updated.created_at == task.created_at


def test_task_update_with_bad_reference_keeps_row_unchanged(managers):
    task = managers.tasks.create(_task("Ship"))
    with pytest.raises(NotFound):
        managers.tasks.update(task.id, schemas.TaskUpdate(title="Changed", assigned_to=schemas.Ref(id=5)))
    managers.tasks.store.db.rollback()
    assert managers.tasks.get_by_id(task.id).title == "Ship"


def test_task_update_status(managers):
    task = managers.tasks.create(_task("Ship"))
    moved = managers.tasks.update_status(task.id, "IN_PROGRESS")
    assert moved.status == "IN_PROGRESS"
    with pytest.raises(ValidationFailure):
        managers.tasks.update_status(task.id, "BLOCKED")
    with pytest.raises(NotFound):
        managers.tasks.update_status(999, "DONE")


def test_task_list_filter_precedence(managers, user_factory):
    ann = user_factory("ann@example.com")
    managers.tasks.create(_task("a", status=TaskStatus.DONE, priority=Priority.HIGH))
    managers.tasks.create(_task("b", status=TaskStatus.DONE, priority=Priority.LOW))
    managers.tasks.create(_task("c", priority=Priority.HIGH, assigned_to=schemas.Ref(id=ann.id)))

    def titles(**kw):
        return [t.title for t in managers.tasks.list(TaskFilters(**kw))]

    assert titles(status=TaskStatus.DONE, priority=Priority.HIGH) == ["a"]
    assert titles(status=TaskStatus.DONE, assigned_to=ann.id) == ["a", "b"]
    assert titles(priority=Priority.HIGH) == ["a", "c"]
    assert titles(assigned_to=ann.id) == ["c"]
    assert titles() == ["a", "b", "c"]


def test_task_due_range(managers):
    managers.tasks.create(_task("soon", due_date=date(2024, 5, 1)))
    managers.tasks.create(_task("later", due_date=date(2024, 6, 1)))
    found = managers.tasks.get_due_between(date(2024, 4, 1), date(2024, 5, 15))
    assert [t.title for t in found] == ["soon"]
    with pytest.raises(ValidationFailure):
        managers.tasks.get_due_between(date(2024, 6, 1), date(2024, 5, 1))


def test_task_stats(managers):
    managers.tasks.create(_task("a"))
    managers.tasks.create(_task("b", status=TaskStatus.DONE))
    managers.tasks.create(_task("c", status=TaskStatus.DONE))
    stats = managers.tasks.stats()
    assert stats.model_dump() == {"total": 3, "todo": 1, "in_progress": 0, "done": 2}


def test_deleted_project_leaves_dangling_task_reference(managers, project_factory):
    project = project_factory("Launch")
    task = managers.tasks.create(_task("Ship", project=schemas.Ref(id=project.id)))

    managers.projects.delete(project.id)
    with pytest.raises(NotFound):
        managers.projects.get_by_id(project.id)
    with pytest.raises(NotFound):
        managers.projects.delete(project.id)

    managers.tasks.store.db.expire_all()
    reloaded = managers.tasks.get_by_id(task.id)
    assert reloaded.project_id == project.id
    assert reloaded.project is None


# Entities

def test_entity_create_and_status_change(managers, user_factory):
    ann = user_factory("ann@example.com")
    entity = managers.entities.create(schemas.EntityCreate(name="Widget", owner=schemas.Ref(id=ann.id)))
    assert entity.status == EntityStatus.ACTIVE.value
    assert entity.owner.id == ann.id
    moved = managers.entities.update_status(entity.id, EntityStatus.COMPLETED)
    assert moved.status == "COMPLETED"
    assert [e.id for e in managers.entities.get_by_owner(ann.id)] == [entity.id]


def test_entity_bulk_create_is_all_or_nothing(managers):
    payloads = [
        schemas.EntityCreate(name="one"),
        schemas.EntityCreate(name="two", owner=schemas.Ref(id=42)),
    ]
    with pytest.raises(NotFound):
        managers.entities.save_all(payloads)
    assert managers.entities.get_all() == []

    saved = managers.entities.save_all([schemas.EntityCreate(name="one"), schemas.EntityCreate(name="two")])
    assert [e.name for e in saved] == ["one", "two"]


def test_entity_grouped_counts_include_every_status(managers):
    managers.entities.create(schemas.EntityCreate(name="a"))
    managers.entities.create(schemas.EntityCreate(name="b", status=EntityStatus.PENDING))
    assert managers.entities.count_by_status_grouped() == {
        "ACTIVE": 1,
        "INACTIVE": 0,
        "PENDING": 1,
        "COMPLETED": 0,
    }
    stats = managers.entities.stats()
    assert stats.total == 2
    assert managers.entities.count_by_status("ACTIVE") == 1


def test_entity_list_and_date_range(managers):
    managers.entities.create(schemas.EntityCreate(name="a"))
    managers.entities.create(schemas.EntityCreate(name="b", status=EntityStatus.INACTIVE))
    assert [e.name for e in managers.entities.list(EntityFilters(status=EntityStatus.INACTIVE))] == ["b"]
    assert [e.name for e in managers.entities.list(EntityFilters(name="a"))] == ["a"]
    assert len(managers.entities.list(EntityFilters())) == 2

    now = datetime.now(UTC)
    found = managers.entities.get_by_date_range(now - timedelta(hours=1), now + timedelta(hours=1))
    assert len(found) == 2
    with pytest.raises(ValidationFailure):
        managers.entities.get_by_date_range(now, now - timedelta(days=1))


# Round trips and failed writes

def _task_fields(task):
    return {
        "title": task.title,
        "description": task.description,
        "status": task.status,
        "priority": task.priority,
        "due_date": task.due_date,
        "assigned_to_id": task.assigned_to_id,
        "project_id": task.project_id,
    }


def test_task_read_back_matches_payload_field_by_field(managers, user_factory, project_factory):
    ann = user_factory("ann@example.com")
    project = project_factory("Launch")
    payload = _task(
        "  Ship the release  ",
        description=" multi\nline ",
        status=TaskStatus.IN_PROGRESS,
        priority=Priority.HIGH,
        due_date=date(2024, 7, 1),
        assigned_to=schemas.Ref(id=ann.id),
        project=schemas.Ref(id=project.id),
    )
    created = managers.tasks.create(payload)
    managers.tasks.store.db.expire_all()

    assert _task_fields(managers.tasks.get_by_id(created.id)) == {
        "title": "  Ship the release  ",
        "description": " multi\nline ",
        "status": "IN_PROGRESS",
        "priority": "HIGH",
        "due_date": date(2024, 7, 1),
        "assigned_to_id": ann.id,
        "project_id": project.id,
    }


def test_entity_read_back_matches_payload_field_by_field(managers, user_factory):
    ann = user_factory("ann@example.com")
    created = managers.entities.create(
        schemas.EntityCreate(
            name=" Widget ",
            description="blue",
            status=EntityStatus.PENDING,
            owner=schemas.Ref(id=ann.id),
        )
    )
    managers.entities.store.db.expire_all()

    stored = managers.entities.get_by_id(created.id)
    assert (stored.name, stored.description, stored.status, stored.owner_id) == (
        " Widget ",
        "blue",
        "PENDING",
        ann.id,
    )


def test_blank_text_is_still_rejected(managers):
    with pytest.raises(ValidationFailure) as excinfo:
        managers.tasks.create(_task("   "))
    assert excinfo.value.field == "title"
    assert managers.tasks.get_all() == []


def test_update_and_delete_of_unknown_id_leave_store_unchanged(managers):
    managers.tasks.create(_task("a", description="first"))
    managers.tasks.create(_task("b", status=TaskStatus.DONE))
    before = [(t.id, _task_fields(t)) for t in managers.tasks.get_all()]

    with pytest.raises(NotFound):
        managers.tasks.update(999, schemas.TaskUpdate(title="changed"))
    with pytest.raises(NotFound):
        managers.tasks.update_status(999, TaskStatus.DONE)
    with pytest.raises(NotFound):
        managers.tasks.delete(999)

    managers.tasks.store.db.expire_all()
    assert [(t.id, _task_fields(t)) for t in managers.tasks.get_all()] == before


def test_email_taken_between_check_and_insert_is_a_validation_failure(managers, user_factory, monkeypatch):
    user_factory("ann@example.com")
    monkeypatch.setattr(managers.users.store, "find_by_email", lambda email: None)

    with pytest.raises(ValidationFailure) as excinfo:
        user_factory("ann@example.com", name="Other Ann")
    assert excinfo.value.field == "email"

    monkeypatch.undo()
    assert [u.name for u in managers.users.get_all()] == ["ann"]
