import pytest

from semantic_attributes import PredicateConfigurationException, UrlPredicate


@pytest.fixture
def predicate():
    return UrlPredicate("foo")


def test_ip_addresses(predicate):
    assert predicate.allow_ip_address is True, "default allow_ip_address is True"
    assert predicate.validate("http://192.168.0.10", None), "ip address"
    assert predicate.validate("http://www.example.com", None), "basic url still works"

    predicate.allow_ip_address = False
    assert not predicate.validate("http://192.168.0.10", None), "ip address"
    assert not predicate.validate("http://[::1]/", None), "ipv6 address"
    assert predicate.validate("http://www.example.com", None), "basic url still works"


def test_schemes(predicate):
    assert predicate.schemes == ["http", "https"], "default allowed schemes"

    assert predicate.validate("http://example.com/", None)
    assert not predicate.validate("ftp://example.com/", None)

    predicate.schemes = ["ftp"]

    assert not predicate.validate("http://example.com/", None)
    assert predicate.validate("ftp://example.com/", None)


def test_schemes_are_case_sensitive(predicate):
    assert not predicate.validate("HTTP://example.com/", None)


def test_domains(predicate):
    assert predicate.domains is None, "default allows any domain"

    assert predicate.validate("http://example.com", None)
    assert predicate.validate("http://example.co.uk", None)
    assert predicate.validate("http://example.xyz", None)
    assert not predicate.validate("http://example", None)
    assert not predicate.validate("http://example.", None)
    assert predicate.validate("http://127.0.0.1", None)

    predicate.domains = ["com", "net", "org"]

    assert predicate.validate("http://example.com", None)
    assert not predicate.validate("http://example.co.uk", None)
    assert not predicate.validate("http://example.xyz", None)
    assert not predicate.validate("http://example", None)
    assert not predicate.validate("http://example.", None)
    assert not predicate.validate("http://127.0.0.1", None)


def test_domains_ignore_case(predicate):
    predicate.domains = ["COM"]

    assert predicate.validate("http://Example.Com", None)


def test_ports(predicate):
    assert predicate.ports is None, "default allows any port"

    assert predicate.validate("http://example.com", None)
    assert predicate.validate("http://example.com:80", None)
    assert predicate.validate("http://example.com:443", None)

    predicate.ports = [None, 80]

    assert predicate.validate("http://example.com", None)
    assert predicate.validate("http://example.com:80", None)
    assert not predicate.validate("http://example.com:443", None)


def test_bad_url(predicate):
    assert not predicate.validate("http:\\\\example.com\\", None)
    assert not predicate.validate("example.com", None), "human format does not validate"
    assert not predicate.validate("http://exa mple.com", None)
    assert not predicate.validate("http://example.com:port", None)
    assert not predicate.validate("http://example.com:99999", None)
    assert not predicate.validate("http://", None)
    assert not predicate.validate(None, None)
    assert not predicate.validate(42, None)

    assert predicate.normalize("http:\\\\example.com\\") == "http:\\\\example.com\\", "malformed human format is preserved"


def test_implied_scheme(predicate):
    assert predicate.implied_scheme == "http"

    assert predicate.normalize("http://example.com/") == "http://example.com/", "no changes"
    assert predicate.normalize("ftp://example.com/") == "ftp://example.com/", "no changes when scheme is not default"
    assert predicate.normalize("example.com") == "http://example.com", "basic implied scheme support"
    assert predicate.normalize("example.com:443") == "http://example.com:443", "preserve ports"
    assert predicate.normalize("example.com/path/") == "http://example.com/path/", "preserve paths"

    predicate.implied_scheme = None

    assert predicate.normalize("http://example.com/") == "http://example.com/"
    assert predicate.normalize("ftp://example.com/") == "ftp://example.com/"
    assert predicate.normalize("example.com") == "example.com"
    assert predicate.normalize("example.com:80") == "example.com:80"


def test_normalize_leaves_non_strings_alone(predicate):
    assert predicate.normalize(None) is None
    assert predicate.normalize("") == ""


def test_normalize_is_idempotent(predicate, fake):
    for _ in range(20):
        value = fake.domain_name()
        once = predicate.normalize(value)

        assert predicate.normalize(once) == once
        assert predicate.validate(once, None)


def test_generated_urls_validate(predicate, fake):
    for _ in range(20):
        assert predicate.validate(fake.url(), None)


def test_options_at_construction():
    predicate = UrlPredicate("homepage", {
        "schemes": ("https",),
        "domains": ["org"],
        "ports": [None, "8443"],
        "allow_ip_address": False,
        "implied_scheme": "https",
    })

    assert predicate.schemes == ["https"]
    assert predicate.ports == [None, 8443]
    assert predicate.validate("https://example.org:8443/", None)
    assert not predicate.validate("https://example.org:8080/", None)
    assert predicate.normalize("example.org") == "https://example.org"


def test_options_are_typed():
    with pytest.raises(PredicateConfigurationException):
        UrlPredicate("homepage", {"ports": ["eighty"]})
    with pytest.raises(PredicateConfigurationException):
        UrlPredicate("homepage", {"schemes": "http"})


def test_default_error_message(locale_dir):
    assert UrlPredicate("homepage").error == "is not a valid URL"


def test_blank_input_is_not_given_a_scheme(predicate):
    assert predicate.normalize("   ") == "   "
