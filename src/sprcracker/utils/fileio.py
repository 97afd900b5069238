def read_file(path: str) -> bytes:
    with open(path, 'rb') as res:
        return res.read()
