class StorageKeys:
    """Names of the persisted keys, all sharing one prefix."""

    def __init__(self, prefix: str = "afb_"):
        self.prefix = prefix

    @property
    def feedbacks(self) -> str:
        return f"{self.prefix}feedbacks"

    @property
    def anon_counter(self) -> str:
        return f"{self.prefix}anonCounter"

    @property
    def current_user(self) -> str:
        return f"{self.prefix}currentUser"

    def student_name(self, email: str) -> str:
        # raw email, not normalized
        return f"{self.prefix}studentNameByEmail:{email}"
