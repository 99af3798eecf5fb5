# ==================================================
# sample_hash/const.py
# ==================================================
SAMPLE_SIZE      = 16 * 1024     # bytes per sampled window
SAMPLE_THRESHOLD = 128 * 1024    # inputs up to this length are hashed whole

DIGEST_SIZE      = 16            # raw hash and final digest, in bytes
MAX_LENGTH_BYTES = 8             # length prefix never exceeds a u64
MAX_INPUT_LENGTH = (1 << 64) - 1

MIX_SEED         = 0x5A17_C0DE   # fixed, never derived from the environment
READ_CHUNK_SIZE  = 1024 * 1024   # upper bound on a single read
