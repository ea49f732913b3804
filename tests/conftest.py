import django
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[
                "django.contrib.contenttypes",
                "wemd",
            ],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                },
            ],
            DATABASES={},
            USE_TZ=True,
        )
        django.setup()


def _pandoc_available():
    try:
        import pypandoc

        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


@pytest.fixture
def pandoc():
    if not _pandoc_available():
        pytest.skip("Pandoc is not available")


@pytest.fixture
def no_pandoc(monkeypatch):
    """Make every TeX conversion fail as if Pandoc were missing."""
    import pypandoc

    from wemd.markdown.extensions.math import tex_to_mathml

    def missing(*args, **kwargs):
        raise OSError("No pandoc was found")

    tex_to_mathml.cache_clear()
    monkeypatch.setattr(pypandoc, "convert_text", missing)
    yield
    tex_to_mathml.cache_clear()


@pytest.fixture
def export_context():
    return {"export_mode": True, "root_id": "wemd", "theme_css": ""}
