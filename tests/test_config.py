from frechetkit.config import Config, config


def test_reset_restores_defaults():
    settings = Config()
    settings.verbosity = 5
    settings.mp_dynamic = False
    settings.number_threads = 8
    settings.reset()
    assert settings == Config()


def test_defaults_match_documented_values():
    settings = Config()
    assert (settings.verbosity, settings.mp_dynamic, settings.number_threads) == (0, True, -1)


def test_instances_are_independent():
    first = Config()
    second = Config()
    first.verbosity = 3
    assert second.verbosity == 0
    assert first != second


def test_shared_instance_can_be_reset():
    config.verbosity = 2
    config.reset()
    assert config == Config()