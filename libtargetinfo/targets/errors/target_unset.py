from libtargetinfo.exceptions import TargetInfoError


class TargetUnsetError(TargetInfoError):
    def __init__(self, variable: str) -> None:
        super().__init__(variable)
        self.variable = variable

    @property
    def summary(self) -> str:
        return "Compilation target is not set!"

    @property
    def details(self) -> str:
        return (
            f"Environment variable '{self.variable}' is either absent or is not valid text.\n"
            "Build tooling usually sets it for you, otherwise specify target explicitly."
        )
