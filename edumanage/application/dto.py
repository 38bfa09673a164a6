from dataclasses import dataclass, fields


@dataclass
class InsertAck:
    inserted_id: int
    acknowledged: bool = True


@dataclass
class UpdateResult:
    matched_count: int
    modified_count: int
    acknowledged: bool = True


@dataclass
class _Patch:
    def as_dict(self) -> dict:
        """Только явно переданные поля: None означает «не трогать»."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class UserPatch(_Patch):
    name: str | None = None
    photo_url: str | None = None
    phone: str | None = None


# total_enrollment меняется только через increment_field
@dataclass
class ClassPatch(_Patch):
    title: str | None = None
    description: str | None = None
    price: float | None = None
    image: str | None = None
    status: str | None = None
