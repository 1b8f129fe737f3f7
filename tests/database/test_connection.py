from src.attendance_tracker.attendance_tracker.database.connection import DBConfig, DatabaseConnection


def test_db_config_from_settings_dict():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307", "database": "attendance_test"})

    assert cfg.port == 3307
    assert cfg.user == "root"
    assert cfg.connect_kwargs()["database"] == "attendance_test"
    assert "database" not in cfg.connect_kwargs(with_database=False)


def test_instance_follows_config_changes():
    first = DatabaseConnection.get_instance(DBConfig(database="a"))

    assert DatabaseConnection.get_instance(DBConfig(database="a")) is first
    assert DatabaseConnection.get_instance(DBConfig(database="b")).config.database == "b"
