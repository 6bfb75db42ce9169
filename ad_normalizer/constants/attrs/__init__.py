from .ldap import *
from .local import *
