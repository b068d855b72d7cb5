from dataclasses import dataclass, field
from omegaconf   import OmegaConf
from omegaconf.errors import ValidationError
from typing      import List


@dataclass
class FrameConfig:
    parent     : str
    name       : str
    position   : List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    quaternion : List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 1.0])


@dataclass
class FrameGraphConfig:
    separator                   : str  = '/'
    truncate_at_common_ancestor : bool = True
    frames                      : List[FrameConfig] = field(default_factory=list)


def load_conf(conf=None):
    """Merges a user configuration over the structured defaults.

    :param conf: Configuration to merge. Dicts, dataclasses and DictConfigs are accepted.
    :type  conf: dict, FrameGraphConfig, omegaconf.DictConfig, NoneType
    :rtype: omegaconf.DictConfig
    """
    out = OmegaConf.structured(FrameGraphConfig)
    if conf is not None:
        out = OmegaConf.merge(out, conf)

    for x, fc in enumerate(out.frames):
        if len(fc.position) != 3:
            raise ValidationError(f'frames[{x}].position needs 3 values, got {len(fc.position)}.')
        if len(fc.quaternion) != 4:
            raise ValidationError(f'frames[{x}].quaternion needs 4 values, got {len(fc.quaternion)}.')
    return out
