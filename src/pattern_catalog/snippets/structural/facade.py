"""Facade: one simple entry point in front of a complicated subsystem."""


class CPU:
    def freeze(self) -> None:
        print("CPU: freeze")

    def jump(self, address: int) -> None:
        print(f"CPU: jump to {address:#06x}")

    def execute(self) -> None:
        print("CPU: execute")


class Memory:
    def load(self, address: int, data: str) -> None:
        print(f"Memory: load {data!r} at {address:#06x}")


class HardDrive:
    def read(self, sector: int, size: int) -> str:
        print(f"Disk: read {size} bytes from sector {sector}")
        return "bootloader"


class ComputerFacade:
    BOOT_ADDRESS = 0x7C00
    BOOT_SECTOR = 0
    SECTOR_SIZE = 512

    def __init__(self):
        self.cpu = CPU()
        self.memory = Memory()
        self.drive = HardDrive()

    def start(self) -> None:
        self.cpu.freeze()
        data = self.drive.read(self.BOOT_SECTOR, self.SECTOR_SIZE)
        self.memory.load(self.BOOT_ADDRESS, data)
        self.cpu.jump(self.BOOT_ADDRESS)
        self.cpu.execute()


def demo() -> None:
    ComputerFacade().start()
    print("Computer started")
