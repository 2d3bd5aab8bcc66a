import pytest

from pattern_demos.config import (
    ESTADO_INICIAL_PADRAO, ConfiguracaoInvalidaError, DemoSettings, get_settings
)


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.state_length == 30
    assert settings.random_seed is None
    assert settings.initial_state == ESTADO_INICIAL_PADRAO


def test_overrides_from_environment(clean_env):
    clean_env.setenv("DEMO_STATE_LENGTH", "15")
    clean_env.setenv("DEMO_RANDOM_SEED", "123")
    clean_env.setenv("DEMO_INITIAL_STATE", "abc")

    settings = get_settings()

    assert settings.state_length == 15
    assert settings.random_seed == 123
    assert settings.initial_state == "abc"


def test_empty_seed_means_unset(clean_env):
    clean_env.setenv("DEMO_RANDOM_SEED", "")
    assert get_settings().random_seed is None


@pytest.mark.parametrize("valor", ["0", "-3", "trinta"])
def test_invalid_state_length(clean_env, valor):
    clean_env.setenv("DEMO_STATE_LENGTH", valor)
    with pytest.raises(ConfiguracaoInvalidaError):
        get_settings()


def test_schema_example_is_declared_in_model_config():
    exemplo = DemoSettings.model_config["json_schema_extra"]["example"]
    assert exemplo["state_length"] == 30
    assert DemoSettings.model_json_schema()["example"]["initial_state"] == ESTADO_INICIAL_PADRAO


def test_empty_state_length_means_default(clean_env):
    clean_env.setenv("DEMO_STATE_LENGTH", "")
    assert get_settings().state_length == 30


def test_empty_initial_state_means_default(clean_env):
    clean_env.setenv("DEMO_INITIAL_STATE", "")
    assert get_settings().initial_state == ESTADO_INICIAL_PADRAO


def test_memento_demo_runs_with_empty_variables(clean_env, capsys):
    from pattern_demos.memento import main

    for nome in ("DEMO_STATE_LENGTH", "DEMO_RANDOM_SEED", "DEMO_INITIAL_STATE"):
        clean_env.setenv(nome, "")

    assert main() == 0
    assert capsys.readouterr().out.startswith(
        f"Originator: My initial state is: {ESTADO_INICIAL_PADRAO}\n"
    )
