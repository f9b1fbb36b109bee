import os
import logging


def get_logger(name, filename=None, log_dir="Logs"):
    """
    Return a logger that writes to <log_dir>/<filename or name>.log and the console.

    Handlers are attached the first time a name is requested. Asking again
    with a different log file moves the file handler there.
    """
    logger = logging.getLogger(name)
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    log_path = os.path.abspath(os.path.join(log_dir, f"{filename if filename else name}.log"))
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if any(h.baseFilename == log_path for h in file_handlers):
        return logger
    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    fh = logging.FileHandler(log_path)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    # FileHandler subclasses StreamHandler, so match the console handler exactly
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    return logger
