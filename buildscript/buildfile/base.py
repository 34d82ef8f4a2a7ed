from abc import ABC, abstractmethod


class BaseBuildfile(ABC):
    """
    Target that compiled build instructions are written to.

    Environment bindings and commands share one ordered stream: an
    implementation must keep every write_env/write_cmd call in the order
    it was made. A buildfile belongs to a single compile call at a time.
    """

    @abstractmethod
    def write_env(self, key: str, value: str) -> None:
        """Record one environment binding"""
        pass

    @abstractmethod
    def write_cmd(self, command: str) -> None:
        """Record one command"""
        pass
