from __future__ import annotations

from enum import Enum


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class AppView(str, Enum):
    DASHBOARD = "dashboard"
    FILES = "files"
    SYSTEM = "system"
    AI_CHAT = "ai-chat"
    SETTINGS = "settings"


class FileCategory(str, Enum):
    DOCUMENT = "document"
    MEDIA = "media"
    CODE = "code"
    ARCHIVE = "archive"
    SYSTEM = "system"
    OTHER = "other"


class FileAction(str, Enum):
    KEEP = "keep"
    REVIEW = "review"
    DELETE = "delete"
    MOVE = "move"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Severity(str, Enum):
    FAVORABLE = "favorable"
    CAUTIONARY = "cautionary"
    BLOCKING = "blocking"


class AuthType(str, Enum):
    API = "api"
    OAUTH = "oauth"
    TOKEN = "token"
