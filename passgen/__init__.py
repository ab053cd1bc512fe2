from .pwgen import (PasswordOptions, ConstraintUnsatisfiable,
                    generate_random_password, generate_memorable_password,
                    generate_password, RANDOM, MEMORABLE, MODES)
