import storefront.exceptions as exceptions

from storefront.exceptions import ConfigurationError, InvalidConfigError, StorefrontError


def test_hierarchy():
    assert issubclass(ConfigurationError, StorefrontError)
    assert issubclass(InvalidConfigError, ConfigurationError)


def test_only_raised_exceptions_are_defined():
    defined = {
        name
        for name, value in vars(exceptions).items()
        if isinstance(value, type) and issubclass(value, Exception)
    }

    assert defined == {"StorefrontError", "ConfigurationError", "InvalidConfigError"}
