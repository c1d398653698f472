import config


def test_env_helpers_fall_back(monkeypatch):
    monkeypatch.setenv("PORT_TEST", "not-a-number")
    monkeypatch.setenv("LIST_TEST", "a, b,,c")
    assert config._env_int("PORT_TEST", 3220) == 3220
    assert config._env_list("LIST_TEST") == ["a", "b", "c"]
    assert config._env("UNSET_TEST_KEY", "x") == "x"


def test_default_settings():
    s = config.Settings()
    assert s.courses_file.name == "courses.json"
    assert s.courses_file.is_absolute()
    assert s.mongo_collection
