from .numpy_register import NumPyRegister
from .register import execute, get_implementation
