from fifo_semaphore.common.error_codes import ERROR_CODES, ErrorCode


def test_error_code_format():
    error_code = ErrorCode("FifoSemaphore", "400", "00", "Bad permits")
    assert error_code.code == "FifoSemaphore-400-00"
    assert str(error_code) == "FifoSemaphore-400-00: Bad permits"


def test_error_codes_are_unique():
    codes = [error_code.code for error_code in ERROR_CODES.values()]
    assert len(codes) == len(set(codes))


def test_invalid_permits_error_code_registered():
    assert (
        ERROR_CODES["SEMAPHORE_INVALID_PERMITS_ERROR"].code == "FifoSemaphore-400-00"
    )
