import os
from collections.abc import Mapping
import yaml

# The configuration can be overloaded by a local 'gaussquad.yaml' file, or
# in '~/.gaussquad/gaussquad.yaml'. A yaml file to work with can be created
# using the `dumpconfig` function below

config = {
    'optimization':
    {
        'mode': 'python',
        'verbose': False,
    },
    'roots':
    {
        'epsilon': 1e-15,
        'maxiter': 100,
        'relax': 10,
        # Relaxed tolerances above this issue a ToleranceWarning
        'warn': 1e-12,
    },
    'weights':
    {
        # Largest accepted deviation of the weight sum from 2
        'sum_tolerance': 1e-9,
    },
    'legendre':
    {
        # Legacy Pn(0) = 0 for even n
        'zero_shortcut': False,
    }
}

def update(conf, newconf):
    """Recursive update"""
    for key, value in newconf.items():
        if isinstance(value, Mapping) and value:
            returned = update(conf.get(key, {}), value)
            conf[key] = returned
        else:
            conf[key] = newconf[key]
    return conf

locations = [os.path.expanduser('~/.gaussquad'),
             os.getcwd()]

for loc in locations:
    fl = os.path.expandvars(os.path.join(loc, 'gaussquad.yaml'))
    try:
        with open(fl, 'r') as yf:
            update(config, yaml.load(yf, Loader=yaml.FullLoader) or {})
    except FileNotFoundError:
        pass

def dumpconfig(filename='gaussquad.yaml', path='~/.gaussquad'): # pragma: no cover
    """Dump a configuration file in yaml format
    """
    with open(os.path.join(os.path.expanduser(path), filename), 'w') as yf:
        yaml.dump(config, yf)
