"""
Adapters Package

External service integrations.

Contents:
=========
- s3_adapter: S3-compatible object storage client
- recaptcha_adapter: reCAPTCHA token verification

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from zelene.shared.adapters.s3_adapter import S3Adapter
    from zelene.shared.adapters.recaptcha_adapter import RecaptchaAdapter
"""

from zelene.shared.adapters.s3_adapter import S3Adapter
from zelene.shared.adapters.recaptcha_adapter import RecaptchaAdapter

__all__ = [
    "S3Adapter",
    "RecaptchaAdapter",
]
