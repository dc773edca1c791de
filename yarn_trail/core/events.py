import struct
from typing import Iterator, Tuple

MAGIC = b"YARNLOG"

# Coordinates are packed as unsigned shorts
MAX_DIMENSION = 65536

# Event Types
EVT_ADVANCE = 0x01
EVT_RETREAT = 0x02

class EventWriter:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")

    def write_header(self, width: int, height: int, start_x: int, start_y: int):
        if width > MAX_DIMENSION or height > MAX_DIMENSION:
            raise ValueError(f"Event log supports grids up to {MAX_DIMENSION}x{MAX_DIMENSION}, got {width}x{height}")
        # Header: Magic "YARNLOG" + Width (4b) + Height (4b) + Start X/Y (2b each)
        self.file.write(MAGIC)
        self.file.write(struct.pack(">IIHH", width, height, start_x, start_y))

    def log_advance(self, x: int, y: int, glyph: int):
        # 1b type + 2b X + 2b Y of the new head + 1b glyph left behind
        data = struct.pack(">BHHB", EVT_ADVANCE, x, y, glyph)
        self.file.write(data)

    def log_retreat(self, x: int, y: int):
        # 1b type + 2b X + 2b Y of the head after popping the trail
        data = struct.pack(">BHH", EVT_RETREAT, x, y)
        self.file.write(data)

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.width = 0
        self.height = 0
        self.start = (0, 0)

    def read_header(self) -> Tuple[int, int, int, int]:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        data = self.file.read(12)
        if len(data) != 12:
            raise ValueError("Truncated event log header")
        self.width, self.height, start_x, start_y = struct.unpack(">IIHH", data)
        self.start = (start_x, start_y)
        return self.width, self.height, start_x, start_y

    def stream_events(self) -> Iterator[Tuple[int, Tuple]]:
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = ord(type_byte)

            if type_code == EVT_ADVANCE:
                data = self.read_record(5) # 2 shorts + 1 byte
                x, y, glyph = struct.unpack(">HHB", data)
                yield (type_code, (x, y, glyph))

            elif type_code == EVT_RETREAT:
                data = self.read_record(4) # 2 shorts
                x, y = struct.unpack(">HH", data)
                yield (type_code, (x, y))

            else:
                raise ValueError(f"Unknown event type 0x{type_code:02x}")

    def read_record(self, size: int) -> bytes:
        data = self.file.read(size)
        if len(data) != size:
            raise ValueError(f"Truncated event record (expected {size} bytes, got {len(data)})")
        return data

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
