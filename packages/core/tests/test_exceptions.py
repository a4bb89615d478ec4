from warmup_core.primitives.exceptions import (
    ServiceNotFoundError,
    ServiceRegistrationError,
    TemplateCompileError,
    TemplateError,
    WarmupError,
)


def test_hierarchy() -> None:
    assert issubclass(ServiceNotFoundError, WarmupError)
    assert issubclass(ServiceRegistrationError, WarmupError)
    assert issubclass(TemplateCompileError, TemplateError)
    assert issubclass(TemplateError, WarmupError)


def test_compile_error_message() -> None:
    err = TemplateCompileError("@mail/welcome.html", "unexpected '}'")
    assert err.template_name == "@mail/welcome.html"
    assert err.reason == "unexpected '}'"
    assert str(err) == "Failed to compile template '@mail/welcome.html' - unexpected '}'"

    assert str(TemplateCompileError("base.html")) == "Failed to compile template 'base.html'"
