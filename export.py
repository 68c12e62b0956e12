import argparse
import sys
from rsaexport.keystore import load_key
from rsaexport.rsa_export import RsaExport

def export_key(key_data, private=False, raw=False, der=False, password=None):
    if raw:
        key = key_data
    else:
        key = load_key(key_data, private=private, password=password)
        if key is None and not private:
            # private key files carry the public key too
            key = load_key(key_data, private=True, password=password)
        if key is None:
            return None
    if der:
        return RsaExport.export_public_key_to_der(key)
    if private:
        return RsaExport.export_private_key_to_pem(key)
    return RsaExport.export_public_key_to_pem(key)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Export an RSA key as DER or PEM for use outside the key store.")
    parser.add_argument("key_path", help="Path to the key file (PEM or DER)")
    parser.add_argument("--private", action="store_true", help="Key file holds a private key, "
                                                                  "export it with the PRIVATE KEY envelope")
    parser.add_argument("--raw", action="store_true", help="Key file holds raw PKCS#1 key bytes "
                                                              "as returned by a platform key store")
    parser.add_argument("--der", action="store_true", help="Write the public key DER instead of PEM, "
                                                         "also for private key files")
    parser.add_argument("--password", default=None, help="Password of an encrypted private key")
    parser.add_argument("--output", default=None, help="Output path (default: stdout)")
    args = parser.parse_args(argv)

    with open(args.key_path, 'rb') as file:
        key_data = file.read()

    exported = export_key(key_data, private=args.private, raw=args.raw, der=args.der, password=args.password)
    if exported is None:
        print(f"No RSA key data could be exported from {args.key_path}", file=sys.stderr)
        return 1

    if args.output is None:
        if isinstance(exported, bytes):
            sys.stdout.buffer.write(exported)
        else:
            print(exported)
        return 0

    mode = 'wb' if isinstance(exported, bytes) else 'w'
    newline = None if mode == 'wb' else ''
    with open(args.output, mode, newline=newline) as file:
        file.write(exported)
    print(f"Exported key written to {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
