"""Configuração do pytest para o serviço de callback WeCom."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.infra.crypto import EnvelopeCodec, KeyContext  # noqa: E402

# Chave e token de teste publicados pela plataforma
TEST_TOKEN = "QDG6eK"
TEST_ENCODING_AES_KEY = "jWmYm7qr5nMoAUwZRjGtBxmz3KA1tkAj3ykkR6q2B2C"


@pytest.fixture
def key_context() -> KeyContext:
    return KeyContext.from_encoding_key(TEST_ENCODING_AES_KEY, TEST_TOKEN)


@pytest.fixture
def codec(key_context: KeyContext) -> EnvelopeCodec:
    return EnvelopeCodec(key_context)


@pytest.fixture(autouse=True)
def _clear_cached_singletons():
    """Settings e codec são lru_cache; cada teste começa limpo."""
    from app.bootstrap import get_envelope_codec, get_message_handler
    from config.settings import get_base_settings, get_wecom_settings

    caches = (get_base_settings, get_wecom_settings, get_envelope_codec, get_message_handler)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
