"""Constantes criptográficas do callback WeCom."""

AES_KEY_SIZE = 32  # 256 bits
IV_SIZE = 16  # bloco nativo do AES
CIPHER_BLOCK_SIZE = 16
PADDING_BLOCK_SIZE = 32  # bloco do padding da plataforma (não é PKCS#7 de 16)
RANDOM_PREFIX_SIZE = 16
LENGTH_PREFIX_SIZE = 4  # uint32 big-endian
FRAME_HEADER_SIZE = RANDOM_PREFIX_SIZE + LENGTH_PREFIX_SIZE
