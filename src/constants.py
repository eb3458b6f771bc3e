"""Application constants - centralized configuration values."""

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
HTTPX_TIMEOUT = 10.0

# =============================================================================
# Session & Security
# =============================================================================
SESSION_COOKIE_NAME = "session"
SESSION_TOKEN_BYTES = 20
GITHUB_OAUTH_STATE_COOKIE = "github_oauth_state"
OAUTH_STATE_MAX_AGE = 60 * 10  # 10 minutes
OAUTH_STATE_BYTES = 32

# =============================================================================
# OAuth Providers
# =============================================================================
PROVIDER_GITHUB = "github"

# =============================================================================
# External API URLs
# =============================================================================
GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_USER_URL = "https://api.github.com/user"
GITHUB_USER_EMAILS_URL = "https://api.github.com/user/emails"
GITHUB_OAUTH_SCOPE = "user:email"
