from src.attendance_tracker.attendance_tracker.database.bootstrap import (
    SCHEMA_PATH,
    demo_profile_id,
    iter_sql_statements,
)


def test_iter_sql_statements_respects_quotes_and_comments():
    sql = """
    -- comment; ignored
    INSERT INTO t VALUES ('a;b');
    UPDATE t SET x = "c;d"
    """
    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'UPDATE t SET x = "c;d"',
    ]


def test_schema_declares_one_record_per_employee_and_day():
    statements = list(iter_sql_statements(SCHEMA_PATH.read_text(encoding="utf-8")))
    attendance = next(s for s in statements if "CREATE TABLE" in s and "attendance_records" in s)
    assert "UNIQUE" in attendance
    assert "employee_id, work_date" in attendance


def test_demo_profile_ids_are_stable():
    assert demo_profile_id("eli@example.com") == demo_profile_id("eli@example.com")
    assert demo_profile_id("eli@example.com") != demo_profile_id("nora@example.com")
