# ----- cli.py -----
import sys
from recovery.commitment import create_commitment, verify_commitment
from recovery.decoder import read_points
from recovery.errors import RecoveryError, CommitmentMismatch
from recovery.interpolator import interpolate_at_zero
from recovery.reporting import print_header, format_points

USAGE = "Usage: recover-secret <path_to_json_file> [expected_sha256_commitment]"

def recover_secret(path, expected_commitment=None):
    """Decode the share file at path and return (points, secret, commitment)."""
    points = read_points(path)
    secret = interpolate_at_zero(points)
    commitment = create_commitment(secret)

    if expected_commitment is not None and not verify_commitment(secret, expected_commitment):
        raise CommitmentMismatch(expected_commitment, commitment)
    return points, secret, commitment

def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not 1 <= len(args) <= 2:
        print(USAGE)
        return 1

    path = args[0]
    expected = args[1] if len(args) == 2 else None

    try:
        points, secret, commitment = recover_secret(path, expected)
    except RecoveryError as e:
        print("Error:", e)
        return 1

    print(f"Successfully parsed {len(points)} points from {path}")
    print_header("Shares used for reconstruction")
    print(format_points(points))

    print(f"\n The calculated secret (c) is: {secret}")
    print(f" Commitment (SHA-256): {commitment}")
    if expected is not None:
        print(" ✓ Commitment verified!")
    return 0

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
