"""
Tests for Nominatim client configuration.

Covers NominatimProperties creation from a config section, TOML loading,
.env handling and ${VAR} substitution.
"""

import os
import tempfile
from pathlib import Path

import pytest
import tomli

from lib.nominatim import NominatimProperties, loadConfig
from lib.nominatim.config import loadDotEnv, substituteEnvVars
from lib.nominatim.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tempDir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sampleConfigToml():
    """Provide sample valid TOML configuration."""
    return """
[nominatim]
search-uri = "https://geo.example.org/search"
reverse-uri = "https://geo.example.org/reverse"
user-agent = "test-app/1.0 (${NOMINATIM_TEST_CONTACT})"
request-timeout = 2.5

[logging]
level = "DEBUG"
"""


# ============================================================================
# NominatimProperties
# ============================================================================


class TestNominatimProperties:
    """Test creation of client properties, dood!"""

    def testDefaults(self):
        """Test default properties point to the public instance."""
        properties = NominatimProperties()

        assert properties.searchUri == "https://nominatim.openstreetmap.org/search"
        assert properties.reverseUri == "https://nominatim.openstreetmap.org/reverse"
        assert properties.userAgent == DEFAULT_USER_AGENT
        assert properties.requestTimeout == DEFAULT_TIMEOUT

    @pytest.mark.parametrize("section", [None, {}])
    def testFromEmptyConfig(self, section):
        """Test that missing config keeps all defaults."""
        assert NominatimProperties.fromConfig(section) == NominatimProperties()

    def testFromConfig(self):
        """Test that kebab-case keys are mapped to properties."""
        properties = NominatimProperties.fromConfig(
            {
                "search-uri": "http://localhost:8080/search",
                "request-timeout": 3,
            }
        )

        assert properties.searchUri == "http://localhost:8080/search"
        assert properties.reverseUri == "https://nominatim.openstreetmap.org/reverse"
        assert properties.requestTimeout == 3.0

    def testPropertiesAreImmutable(self):
        """Test that properties can not be changed after creation."""
        properties = NominatimProperties()

        with pytest.raises(AttributeError):
            properties.searchUri = "https://other.example.org/search"  # type: ignore[misc]


# ============================================================================
# Config loading
# ============================================================================


class TestLoadConfig:
    """Test TOML config loading, dood!"""

    def testLoadConfig(self, tempDir, sampleConfigToml, monkeypatch):
        """Test loading config with environment substitution."""
        monkeypatch.setenv("NOMINATIM_TEST_CONTACT", "dev@example.org")
        configFile = tempDir / "config.toml"
        configFile.write_text(sampleConfigToml)

        config = loadConfig(str(configFile), dotEnvFile=None)

        assert config["logging"]["level"] == "DEBUG"
        properties = NominatimProperties.fromConfig(config["nominatim"])
        assert properties.searchUri == "https://geo.example.org/search"
        assert properties.userAgent == "test-app/1.0 (dev@example.org)"
        assert properties.requestTimeout == 2.5

    def testLoadConfigWithDotEnv(self, tempDir, sampleConfigToml, monkeypatch):
        """Test that variables from .env file are substituted."""
        monkeypatch.delenv("NOMINATIM_TEST_CONTACT", raising=False)
        configFile = tempDir / "config.toml"
        configFile.write_text(sampleConfigToml)
        envFile = tempDir / ".env"
        envFile.write_text('# contact\nNOMINATIM_TEST_CONTACT="ops@example.org"\n')

        try:
            config = loadConfig(str(configFile), dotEnvFile=str(envFile))
        finally:
            os.environ.pop("NOMINATIM_TEST_CONTACT", None)

        assert config["nominatim"]["user-agent"] == "test-app/1.0 (ops@example.org)"

    def testMissingConfigFile(self, tempDir):
        """Test that a missing file gives empty config."""
        assert loadConfig(str(tempDir / "missing.toml"), dotEnvFile=None) == {}

    def testInvalidConfigFile(self, tempDir):
        """Test that broken TOML is reported."""
        configFile = tempDir / "config.toml"
        configFile.write_text("[nominatim\nsearch-uri = ")

        with pytest.raises(tomli.TOMLDecodeError):
            loadConfig(str(configFile), dotEnvFile=None)


class TestEnvironment:
    """Test .env loading and ${VAR} substitution, dood!"""

    def testLoadDotEnvDoesNotOverride(self, tempDir, monkeypatch):
        """Test that existing environment wins over .env values."""
        monkeypatch.setenv("NOMINATIM_TEST_EXISTING", "from-env")
        monkeypatch.delenv("NOMINATIM_TEST_NEW", raising=False)
        envFile = tempDir / ".env"
        envFile.write_text("NOMINATIM_TEST_EXISTING=from-file\n\nNOMINATIM_TEST_NEW = new\nbroken line\n")

        try:
            values = loadDotEnv(str(envFile))
            assert values == {"NOMINATIM_TEST_EXISTING": "from-file", "NOMINATIM_TEST_NEW": "new"}
            assert substituteEnvVars("${NOMINATIM_TEST_EXISTING}") == "from-env"
            assert substituteEnvVars("${NOMINATIM_TEST_NEW}") == "new"
        finally:
            os.environ.pop("NOMINATIM_TEST_NEW", None)

    def testLoadMissingDotEnv(self, tempDir):
        """Test that a missing .env file is ignored."""
        assert loadDotEnv(str(tempDir / ".env")) == {}

    def testSubstituteNested(self, monkeypatch):
        """Test substitution in nested structures."""
        monkeypatch.setenv("NOMINATIM_TEST_HOST", "geo.example.org")

        result = substituteEnvVars(
            {
                "uri": "https://${NOMINATIM_TEST_HOST}/search",
                "list": ["${NOMINATIM_TEST_HOST}", 1],
                "timeout": 10,
            }
        )

        assert result == {
            "uri": "https://geo.example.org/search",
            "list": ["geo.example.org", 1],
            "timeout": 10,
        }

    def testUnknownVariableIsKept(self, monkeypatch):
        """Test that unknown placeholders are left as is."""
        monkeypatch.delenv("NOMINATIM_TEST_UNKNOWN", raising=False)

        assert substituteEnvVars("${NOMINATIM_TEST_UNKNOWN}") == "${NOMINATIM_TEST_UNKNOWN}"
