from blogcheck.configs import ValidationConfig
from blogcheck.configs import DEFAULT_EMAIL_PATTERN
import pytest
from pydantic import ValidationError

# --- ValidationConfig Tests ---

def test_validation_config_defaults():
    config = ValidationConfig()
    assert config.title_min_length == 2
    assert config.title_max_length == 200
    assert config.text_min_length == 2
    assert config.text_max_length == 10000
    assert config.email_pattern == DEFAULT_EMAIL_PATTERN

def test_validation_config_custom_values():
    config = ValidationConfig(title_max_length=None, text_min_length=1)
    assert config.title_max_length is None
    assert config.text_min_length == 1

def test_validation_config_invalid_type():
    with pytest.raises(ValidationError):
        ValidationConfig(title_min_length="two")

def test_validation_config_negative_bound():
    with pytest.raises(ValidationError):
        ValidationConfig(text_min_length=-1)

def test_validation_config_min_above_max():
    with pytest.raises(ValidationError):
        ValidationConfig(title_min_length=50, title_max_length=10)

def test_validation_config_bad_pattern():
    with pytest.raises(ValidationError):
        ValidationConfig(email_pattern="[a-z")

def test_validation_config_unknown_field():
    with pytest.raises(ValidationError):
        ValidationConfig(title_max=100)
