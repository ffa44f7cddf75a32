"""
Order Service — ユーザープロフィール (不変オブジェクト)

注文集約と同じ考え方の小さな例:
  1. フィールドはすべて読み取り専用 (frozen)
  2. セッターを持たない
  3. 必須フィールド (id, email) は Builder の生成時に渡す

変更したいときは to_builder() で新しいプロフィールを組み立てる。
"""

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    phone: str | None = None
    display_name: str | None = None
    address: str | None = None
    marketing_opt_in: bool = False
    twitter: str | None = None
    github: str | None = None

    @staticmethod
    def builder(profile_id: str, email: str) -> "UserProfileBuilder":
        return UserProfileBuilder(profile_id, email)

    def to_builder(self) -> "UserProfileBuilder":
        """全フィールドをコピーした Builder を返す。"""
        return (
            UserProfileBuilder(self.id, self.email)
            .phone(self.phone)
            .display_name(self.display_name)
            .address(self.address)
            .marketing_opt_in(self.marketing_opt_in)
            .twitter(self.twitter)
            .github(self.github)
        )


class UserProfileBuilder:
    def __init__(self, profile_id: str, email: str) -> None:
        self._id = profile_id
        self._email = email
        self._phone: str | None = None
        self._display_name: str | None = None
        self._address: str | None = None
        self._marketing_opt_in: bool = False
        self._twitter: str | None = None
        self._github: str | None = None

    def phone(self, phone: str | None) -> "UserProfileBuilder":
        self._phone = phone
        return self

    def display_name(self, display_name: str | None) -> "UserProfileBuilder":
        self._display_name = display_name
        return self

    def address(self, address: str | None) -> "UserProfileBuilder":
        self._address = address
        return self

    def marketing_opt_in(self, marketing_opt_in: bool) -> "UserProfileBuilder":
        self._marketing_opt_in = marketing_opt_in
        return self

    def twitter(self, twitter: str | None) -> "UserProfileBuilder":
        self._twitter = twitter
        return self

    def github(self, github: str | None) -> "UserProfileBuilder":
        self._github = github
        return self

    def build(self) -> UserProfile:
        return UserProfile(
            id=self._id,
            email=self._email,
            phone=self._phone,
            display_name=self._display_name,
            address=self._address,
            marketing_opt_in=self._marketing_opt_in,
            twitter=self._twitter,
            github=self._github,
        )
