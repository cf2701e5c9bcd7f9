"""Unit tests for the UnitOfWork context manager."""
import pytest
from sqlmodel import Session, select
from postboard.models.core import Territory
from postboard.infra.db.uow import UnitOfWork


def test_reads_rows_written_by_another_session(use_test_engine):
    with Session(use_test_engine) as s:
        s.add(Territory(name="North"))
        s.commit()

    with UnitOfWork() as uow:
        names = [t.name for t in uow.session.exec(select(Territory)).all()]
    assert names == ["North"]


def test_clean_exit_discards_flushed_writes(use_test_engine):
    with UnitOfWork() as uow:
        uow.session.add(Territory(name="Discarded"))
        uow.session.flush()

    with Session(use_test_engine) as s:
        assert s.exec(select(Territory)).all() == []


def test_rollback_on_exception_reverts_record(use_test_engine):
    with pytest.raises(ValueError):
        with UnitOfWork() as uow:
            uow.session.add(Territory(name="Will Be Rolled Back"))
            uow.session.flush()  # write to DB within transaction
            raise ValueError("forced error")

    with Session(use_test_engine) as s:
        assert s.exec(select(Territory)).all() == []


def test_has_no_commit():
    assert not hasattr(UnitOfWork, "commit")


def test_session_outside_context_raises():
    with pytest.raises(RuntimeError):
        UnitOfWork().session


def test_session_closed_after_exit(use_test_engine):
    uow = UnitOfWork()
    with uow:
        pass
    with pytest.raises(RuntimeError):
        uow.session
