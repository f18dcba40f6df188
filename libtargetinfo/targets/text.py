def is_valid_text(value: str) -> bool:
    """Is given string encodable as UTF-8 (has no lone surrogates)?.

    Undecodable environment bytes and escaped lone surrogates in JSON are kept by Python as lone surrogates.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
