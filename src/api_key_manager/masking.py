"""Display masking for API key secrets."""

MASK = "****"
REVEAL_CHARS = 4
# Masked long keys are 12 characters, so only longer keys reveal anything
MIN_REVEAL_LENGTH = 2 * REVEAL_CHARS + len(MASK) + 1
SHORT_MASK = "*" * MIN_REVEAL_LENGTH


def mask_key(secret: str) -> str:
    """Mask a secret for display.

    Secrets of 13 or more characters keep their first and last 4 characters
    around a fixed ``****`` run. Shorter (or empty) secrets become a run of
    13 asterisks so nothing of them is revealed. The mask length always
    differs from the secret length, so a mask never equals its secret.

    A secret that itself contains runs of ``*`` can share more than 4
    characters with its mask. Such a match comes from the placeholder run
    and reveals nothing the mask does not already show.

    Args:
        secret: The raw API key.

    Returns:
        The masked key, e.g. ``sk-a****3456``.
    """
    if len(secret) < MIN_REVEAL_LENGTH:
        return SHORT_MASK
    return f"{secret[:REVEAL_CHARS]}{MASK}{secret[-REVEAL_CHARS:]}"
