from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PeakShapeConfig(BaseSettings):

    sigma: float = Field(.1, gt=0, alias='PEAK_SHAPE_SIGMA')
    fwhm: float = Field(.1, gt=0, alias='PEAK_SHAPE_FWHM')
    sigma_factor: float = Field(3., gt=0, alias='PEAK_SHAPE_SIGMA_FACTOR')
    fwhm_factor: float = Field(5., gt=0, alias='PEAK_SHAPE_FWHM_FACTOR')

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )


PEAK_SHAPE_CONFIG = PeakShapeConfig()
