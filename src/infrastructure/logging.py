import logging
import os
import sys

FRAMEWORK_LOGGERS = ("tensorflow", "absl", "h5py")


def suppress_tensorflow_logging() -> None:
    """
    Suppress verbose TensorFlow logging messages.

    Sets TensorFlow's C++ log level through the environment and raises the
    Python loggers used by TensorFlow and its helpers to ERROR.

    Should be called before importing TensorFlow.
    """
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "2"  # 0=ALL, 1=WARNING+, 2=ERROR+, 3=FATAL

    for name in FRAMEWORK_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)


def setup_logging(level: int = logging.INFO, quiet_frameworks: bool = True):
    """
    Configure logging for an equivalence check run.

    Records go to stdout as "timestamp - logger name - level - message", so
    trial failures logged by the checker interleave with the tqdm summary.
    Python warnings (e.g. NumPy overflow in a candidate) are routed through
    the "py.warnings" logger.

    Parameters:
        level (int): Root log level, INFO by default.
        quiet_frameworks (bool): Raise TensorFlow's loggers to ERROR so their
            start-up chatter does not drown the per-trial records.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.captureWarnings(True)
    if quiet_frameworks:
        suppress_tensorflow_logging()
