from datetime import datetime

import pytest

from app.core.errors import NotFoundException, RecordInvalid
from app.db.models import Comment
from app.repositories.comment_repository import CommentRepository


def test_list_admin_comments_excludes_non_admin_users(db, admin, member, make_comment):
    mine = make_comment(admin.id, "from admin")
    make_comment(member.id, "from member")

    listed = CommentRepository(db).list_admin_comments()

    assert [c.id for c in listed] == [mine.id]


def test_list_admin_comments_excludes_unknown_users(db, admin, make_comment):
    make_comment(9999, "orphan")

    assert CommentRepository(db).list_admin_comments() == []


def test_list_admin_comments_newest_first(db, admin, make_comment):
    oldest = make_comment(admin.id, "oldest", datetime(2021, 1, 1, 9, 0))
    newest = make_comment(admin.id, "newest", datetime(2023, 6, 1, 9, 0))
    middle = make_comment(admin.id, "middle", datetime(2022, 3, 1, 9, 0))

    listed = CommentRepository(db).list_admin_comments()

    assert [c.id for c in listed] == [newest.id, middle.id, oldest.id]


def test_list_admin_comments_same_time_newest_id_first(db, admin, make_comment):
    stamp = datetime(2022, 1, 1, 12, 0)
    first = make_comment(admin.id, "first", stamp)
    second = make_comment(admin.id, "second", stamp)

    listed = CommentRepository(db).list_admin_comments()

    assert [c.id for c in listed] == [second.id, first.id]


def test_find_raises_not_found(db):
    with pytest.raises(NotFoundException) as exc:
        CommentRepository(db).find(42)
    assert exc.value.status_code == 404


def test_save_rejects_blank_content(db, admin):
    repo = CommentRepository(db)

    with pytest.raises(RecordInvalid) as exc:
        repo.save(Comment(user_id=admin.id, content="   "))

    assert exc.value.errors == {"content": ["Content can't be blank"]}
    assert db.query(Comment).count() == 0


def test_save_rejects_missing_user(db):
    with pytest.raises(RecordInvalid) as exc:
        CommentRepository(db).save(Comment(content="Hello"))
    assert exc.value.errors == {"user_id": ["User can't be blank"]}


def test_save_allows_unknown_user_id(db):
    comment = CommentRepository(db).save(Comment(user_id=12345, content="Hello"))

    assert comment.id is not None
    assert comment.user is None


def test_save_sets_timestamps(db, admin):
    comment = CommentRepository(db).save(Comment(user_id=admin.id, content="Hello"))

    assert comment.created_at is not None
    assert comment.updated_at is not None


def test_delete_removes_only_that_record(db, admin, make_comment):
    keep = make_comment(admin.id, "keep")
    drop = make_comment(admin.id, "drop")
    repo = CommentRepository(db)

    repo.delete(drop)

    assert repo.find_by_id(drop.id) is None
    assert repo.find_by_id(keep.id) is not None


@pytest.mark.parametrize("huge_id", [2**63, 99999999999999999999, -(2**63) - 1])
def test_find_by_id_outside_integer_range_is_none(db, huge_id):
    repo = CommentRepository(db)

    assert repo.find_by_id(huge_id) is None
    with pytest.raises(NotFoundException):
        repo.find(huge_id)
