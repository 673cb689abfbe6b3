import pytest
from conftest import d

from gitdaily.errors import BranchNotFoundError, InvalidTransitionError, TaskNotFoundError
from gitdaily.model.entity_id import MAIN_BRANCH_ID
from gitdaily.repository.branch import BRANCH_REPO
from gitdaily.repository.task import TASK_REPO
from gitdaily.service import branch as branch_service
from gitdaily.service import task as task_service


@pytest.fixture
def main_branch(data_dir):
    branch_service.ensure_main_branch()
    return BRANCH_REPO.get_branch(MAIN_BRANCH_ID)


def test_main_branch_is_seeded_once(main_branch):
    branch_service.ensure_main_branch()

    assert [b["id"] for b in BRANCH_REPO.get_all_branches()] == [MAIN_BRANCH_ID]
    assert main_branch["name"] == "Main Timeline"
    assert main_branch["parent_id"] is None
    assert main_branch["start_date"] == d("2023-01-01")


def test_create_branch_defaults_to_main_parent(main_branch):
    branch_id = branch_service.create_branch("Learn Rust", start_date=d("2024-01-10"))

    branch = BRANCH_REPO.get_branch(branch_id)
    assert branch["parent_id"] == MAIN_BRANCH_ID
    assert branch["status"] == "active"
    assert branch["start_date"] == d("2024-01-10")
    assert branch["color"].startswith("#")


def test_create_branch_with_unknown_parent_fails(main_branch):
    with pytest.raises(BranchNotFoundError):
        branch_service.create_branch("Orphan", parent_id="missing")


def test_create_branch_uses_palette_when_random_colors_are_off(main_branch):
    first = branch_service.create_branch("First", random_color=False)
    second = branch_service.create_branch("Second", random_color=False)

    assert BRANCH_REPO.get_branch(first)["color"] != BRANCH_REPO.get_branch(second)["color"]


def test_merge_adds_completed_merge_commit_to_parent(main_branch):
    branch_id = branch_service.create_branch("Side project")

    merge_id = branch_service.merge_branch(branch_id, "ship it", date=d("2024-02-01"))

    merge_task = TASK_REPO.get_task(merge_id)
    assert merge_task["branch_id"] == MAIN_BRANCH_ID
    assert merge_task["status"] == "COMPLETED"
    assert merge_task["is_merge_commit"]
    assert merge_task["commit_message"] == "ship it"
    assert merge_task["date"] == d("2024-02-01")

    branch = BRANCH_REPO.get_branch(branch_id)
    assert branch["status"] == "merged"
    assert branch["merge_target_node_id"] == merge_id


def test_merge_rejects_invalid_states(main_branch):
    branch_id = branch_service.create_branch("Side project")

    with pytest.raises(InvalidTransitionError):
        branch_service.merge_branch(MAIN_BRANCH_ID, "nope")
    with pytest.raises(InvalidTransitionError):
        branch_service.merge_branch(branch_id, "   ")

    branch_service.merge_branch(branch_id, "done")
    with pytest.raises(InvalidTransitionError):
        branch_service.merge_branch(branch_id, "again")

    archived_id = branch_service.create_branch("Shelved")
    branch_service.archive_branch(archived_id)
    with pytest.raises(InvalidTransitionError):
        branch_service.merge_branch(archived_id, "done")


def test_archive_and_restore(main_branch):
    branch_id = branch_service.create_branch("Guitar")

    branch_service.archive_branch(branch_id)
    assert [b["id"] for b in branch_service.get_archived_branches()] == [branch_id]
    assert branch_id not in [b["id"] for b in branch_service.get_active_branches()]
    with pytest.raises(InvalidTransitionError):
        branch_service.archive_branch(branch_id)

    restart_id = branch_service.restore_branch(branch_id, date=d("2024-03-01"))

    branch = BRANCH_REPO.get_branch(branch_id)
    assert branch["status"] == "active"
    assert branch["restored_date"] == d("2024-03-01")
    restart_task = TASK_REPO.get_task(restart_id)
    assert restart_task["title"] == "Project Restarted"
    assert restart_task["status"] == "PLANNED"
    assert restart_task["date"] == d("2024-03-01")

    with pytest.raises(InvalidTransitionError):
        branch_service.restore_branch(branch_id)


def test_main_cannot_be_archived_or_deleted(main_branch):
    with pytest.raises(InvalidTransitionError):
        branch_service.archive_branch(MAIN_BRANCH_ID)
    with pytest.raises(InvalidTransitionError):
        branch_service.delete_branch(MAIN_BRANCH_ID)


def test_delete_branch_reparents_children_and_drops_tasks(main_branch):
    parent_id = branch_service.create_branch("Parent")
    child_id = branch_service.create_branch("Child", parent_id=parent_id)
    task_id = task_service.create_task(parent_id, "Plan", date=d("2024-03-01"))

    assert branch_service.get_lineage(parent_id) == [parent_id, child_id]

    branch_service.delete_branch(parent_id)

    assert not BRANCH_REPO.has_branch(parent_id)
    assert BRANCH_REPO.get_branch(child_id)["parent_id"] == MAIN_BRANCH_ID
    with pytest.raises(TaskNotFoundError):
        TASK_REPO.get_task(task_id)


def test_get_lineage_of_unknown_branch_fails(main_branch):
    with pytest.raises(BranchNotFoundError):
        branch_service.get_lineage("missing")


def test_task_lifecycle(main_branch):
    task_id = task_service.create_task(MAIN_BRANCH_ID, "Run 5k", date=d("2024-03-02"))
    assert TASK_REPO.get_task(task_id)["status"] == "PLANNED"

    with pytest.raises(InvalidTransitionError):
        task_service.complete_task(task_id, "")
    with pytest.raises(InvalidTransitionError):
        task_service.uncomplete_task(task_id)

    task_service.complete_task(task_id, "felt great")
    task = TASK_REPO.get_task(task_id)
    assert task["status"] == "COMPLETED"
    assert task["commit_message"] == "felt great"
    with pytest.raises(InvalidTransitionError):
        task_service.complete_task(task_id, "twice")

    task_service.uncomplete_task(task_id)
    assert TASK_REPO.get_task(task_id)["status"] == "PLANNED"


def test_merge_commit_cannot_be_uncompleted(main_branch):
    branch_id = branch_service.create_branch("Side project")
    merge_id = branch_service.merge_branch(branch_id, "done")

    with pytest.raises(InvalidTransitionError):
        task_service.uncomplete_task(merge_id)


def test_task_on_unknown_branch_fails(main_branch):
    with pytest.raises(BranchNotFoundError):
        task_service.create_task("missing", "Nothing")


def test_move_task(main_branch):
    branch_id = branch_service.create_branch("Reading")
    task_id = task_service.create_task(MAIN_BRANCH_ID, "Finish book")

    task_service.move_task(task_id, branch_id)

    assert [t["id"] for t in TASK_REPO.get_tasks_for_branch(branch_id)] == [task_id]


def test_flush_and_reload_round_trip(main_branch, data_dir):
    branch_id = branch_service.create_branch(
        "Spanish", start_date=d("2024-01-05"), target_date=d("2024-06-30")
    )
    task_id = task_service.create_task(branch_id, "Lesson 1", date=d("2024-01-06"))
    task_service.complete_task(task_id, "hola")
    branch_service.archive_branch(branch_id)
    branch_service.restore_branch(branch_id, date=d("2024-02-01"))

    BRANCH_REPO.flush()
    TASK_REPO.flush()
    assert (data_dir / "branches" / f"{branch_id}.yaml").exists()

    BRANCH_REPO.__init__()  # type: ignore[misc]
    TASK_REPO.__init__()  # type: ignore[misc]

    branch = BRANCH_REPO.get_branch(branch_id)
    assert branch["start_date"] == d("2024-01-05")
    assert branch["target_date"] == d("2024-06-30")
    assert branch["restored_date"] == d("2024-02-01")
    assert branch["status"] == "active"

    task = TASK_REPO.get_task(task_id)
    assert task["date"] == d("2024-01-06")
    assert task["commit_message"] == "hola"
    assert len(TASK_REPO.get_tasks_for_branch(branch_id)) == 2


def test_deleted_branch_file_is_removed_on_flush(main_branch, data_dir):
    branch_id = branch_service.create_branch("Temporary")
    BRANCH_REPO.flush()

    branch_service.delete_branch(branch_id)
    BRANCH_REPO.flush()

    assert not (data_dir / "branches" / f"{branch_id}.yaml").exists()
