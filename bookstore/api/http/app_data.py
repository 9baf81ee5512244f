from dataclasses import dataclass

from bookstore.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
