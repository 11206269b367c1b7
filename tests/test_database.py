"""Table creation and default data seeding."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from hospital_roster.config.settings import settings
from hospital_roster.database import db
from hospital_roster.database.schema import HOSPITAL_INFO_ID, Admin, HospitalInfo


def test_init_creates_all_tables(engine):
    tables = set(inspect(engine).get_table_names())
    assert {"admin", "hospital_info", "staff", "duty"} <= tables


def test_seed_inserts_default_admin_and_hospital(session):
    admins = session.query(Admin).all()
    assert len(admins) == 1
    assert admins[0].username == "admin"
    assert admins[0].password == "0192023a7bbd73250516f069df18b500"

    info = session.get(HospitalInfo, HOSPITAL_INFO_ID)
    assert info.name == settings.hospital_name
    assert info.emergency_phone == settings.hospital_emergency_phone


def test_init_is_idempotent(engine, session):
    session.add(Admin(username="second", password="x"))
    session.commit()

    db.init_database(engine)

    assert session.query(Admin).count() == 2
    assert session.query(HospitalInfo).count() == 1


def test_seed_retries_after_operational_error(engine, monkeypatch):
    real_seed = db.seed_defaults
    calls = []
    sleeps = []

    def flaky_seed(target):
        calls.append(target)
        if len(calls) == 1:
            raise OperationalError("SELECT count(*) FROM admin", {}, Exception("database is locked"))
        real_seed(target)

    monkeypatch.setattr(db, "seed_defaults", flaky_seed)
    monkeypatch.setattr(db.time, "sleep", sleeps.append)

    db.init_database(engine)

    assert len(calls) == 2
    assert sleeps == [settings.seed_retry_delay]


def test_seed_gives_up_after_max_attempts(engine, monkeypatch):
    def broken_seed(target):
        raise OperationalError("SELECT count(*) FROM admin", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "seed_defaults", broken_seed)
    monkeypatch.setattr(db.time, "sleep", lambda seconds: None)
    monkeypatch.setattr(settings, "seed_max_attempts", 3)

    with pytest.raises(OperationalError):
        db.init_database(engine)


def test_table_creation_failure_propagates(engine, monkeypatch):
    def fail_create(*args, **kwargs):
        raise OperationalError("CREATE TABLE staff", {}, Exception("readonly database"))

    table = db.Base.metadata.tables["staff"]
    monkeypatch.setattr(type(table), "create", fail_create)

    with pytest.raises(OperationalError):
        db.init_tables(engine)
