import pytest

from configurator.core.errors import InvalidConfigNameError
from configurator.core.naming import is_valid_config_name, validate_config_name


@pytest.mark.parametrize("name", ["server", "my_app", "my-app", "A", "_", "-", "Mixed_Case-Name"])
def test_valid_names(name):
    assert is_valid_config_name(name)
    validate_config_name(name)


@pytest.mark.parametrize(
    "name",
    ["", "123", "app1", "my app", " app", "app.name", "app/name", "ação", None, 42],
)
def test_invalid_names(name):
    assert not is_valid_config_name(name)
    with pytest.raises(InvalidConfigNameError, match="The name must only contain letters, _ and -"):
        validate_config_name(name)
