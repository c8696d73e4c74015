import sys
from pathlib import Path

def main():
    if len(sys.argv) != 3:
        print("Usage: corrupt_one_byte.py <file> <offset>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    idx = int(sys.argv[2], 0)
    size = p.stat().st_size
    if not 0 <= idx < size:
        print(f"Offset {idx} outside file of {size} bytes.")
        raise SystemExit(2)

    # Flip in place so the file length and every other byte stay untouched.
    with open(p, "r+b") as f:
        f.seek(idx)
        b = f.read(1)[0]
        f.seek(idx)
        f.write(bytes([b ^ 0x01]))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
