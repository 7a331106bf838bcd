"""Collaborator fakes — record calls made by the action orchestrator."""

SEED_PASSWORD = "123456-secret"


class RecordingRevalidator:
    """PathRevalidator fake that records every path."""

    def __init__(self):
        self.paths: list[str] = []

    def revalidate(self, path: str) -> None:
        self.paths.append(path)


class RecordingInvoiceStore:
    """InvoiceWriter fake that records calls; optionally raises."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple] = []
        self.error = error

    async def create(self, customer_id, amount, status, invoice_date):
        self.calls.append(("create", customer_id, amount, status, invoice_date))
        if self.error:
            raise self.error

    async def update(self, invoice_id, customer_id, amount, status):
        self.calls.append(("update", invoice_id, customer_id, amount, status))
        if self.error:
            raise self.error

    async def delete(self, invoice_id):
        self.calls.append(("delete", invoice_id))
        if self.error:
            raise self.error


class FakeUser:
    def __init__(self, email: str, password: str, id: str = "user-1"):
        self.id = id
        self.email = email
        self.password = password


class FakeUserReader:
    """UserReader fake keyed by email; records lookups; optionally raises."""

    def __init__(self, *users: FakeUser, error: Exception | None = None):
        self.users = {u.email: u for u in users}
        self.lookups: list[str] = []
        self.error = error

    async def get_by_email(self, email: str):
        self.lookups.append(email)
        if self.error:
            raise self.error
        return self.users.get(email)


class RecordingSession:
    """SessionEstablisher fake."""

    def __init__(self):
        self.users: list = []

    def establish(self, user) -> None:
        self.users.append(user)
