"""Print a development access token signed with the configured SECRET_KEY.

Usage:
    python create_token.py [subject] [lifetime_seconds]
"""
import sys

from product_api.app.core.config import TokenConfig, settings
from product_api.app.core.security import create_access_token

subject = sys.argv[1] if len(sys.argv) > 1 else "1"
# one year by default
lifetime = int(sys.argv[2]) if len(sys.argv) > 2 else 365 * 24 * 60 * 60
token = create_access_token(TokenConfig.from_settings(settings), subject, expires_in=lifetime)
print(token)
