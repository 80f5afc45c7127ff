"""Constants."""

SRP_LEN_BYTES = 256
NEW_SALT_LEN_BYTES = 32
PBKDF2_HASH_NAME = 'sha512'
PBKDF2_ITERATIONS = 100000
PBKDF2_KEY_LEN_BYTES = 64

SUPPORTED_GENERATORS = (2, 3, 4, 5, 6, 7)

# Miller-Rabin error bound for server supplied moduli
PRIMALITY_FALSE_POSITIVE_PROB = 2 ** -128

KDF_ALGO_NAME = 'passwordKdfAlgoSHA256SHA256PBKDF2HMACSHA512iter100000SHA256ModPow'
INPUT_CHECK_PASSWORD_SRP = 'inputCheckPasswordSRP'
INPUT_CHECK_PASSWORD_EMPTY = 'inputCheckPasswordEmpty'

# 2048-bit safe prime the server hands out in practice
KNOWN_GOOD_PRIME = bytes.fromhex(
    'c71caeb9c6b1c9048e6c522f70f13f73980d40238e3e21c14934d037563d930f'
    '48198a0aa7c14058229493d22530f4dbfa336f6e0ac925139543aed44cce7c37'
    '20fd51f69458705ac68cd4fe6b6b13abdc9746512969328454f18faf8c595f64'
    '2477fe96bb2a941d5bcd1d4ac8cc49880708fa9b378e3c4f3a9060bee67cf9a4'
    'a4a695811051907e162753b56b0f6b410dba74d8a84b2a14b3144e0ef1284754'
    'fd17ed950d5965b4b9dd46582db1178d169c6bc465b0d6ff9ca3928fef5b9ae4'
    'e418fc15e83ebea0f87fa9ff5eed70050ded2849f47bf959d956850ce929851f'
    '0d8115f635b105ee2e4e15d04b2454bf6f4fadf034b10403119cd8e3b92fcc5b'
)

colors = {
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "yellow": "\033[93m",
    "bold": "\x1b[1m",
    "reset": "\x1b[0m",
}
