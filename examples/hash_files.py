# ==================================================
# examples/hash_files.py
# ==================================================
import argparse, logging, sys
from sample_hash import Hasher, SAMPLE_SIZE, SAMPLE_THRESHOLD, SampleHashError

def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="print sampled digests of files")
    p.add_argument("paths", nargs="+", help="files to hash")
    p.add_argument("--sample-size", type=int, default=SAMPLE_SIZE)
    p.add_argument("--threshold", type=int, default=SAMPLE_THRESHOLD)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        hasher = Hasher(args.sample_size, args.threshold)
    except SampleHashError as e:
        p.error(str(e))

    status = 0
    for path in args.paths:
        try:
            print(f"{hasher.sum_file(path)}  {path}")
        except SampleHashError as e:
            print(f"{path}: {e}", file=sys.stderr)
            status = 1
    return status

if __name__ == "__main__":
    sys.exit(main())
