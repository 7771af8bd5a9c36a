from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PeakParameterConfig(BaseSettings):

    minimal_peak_height: float = Field(0., alias='PEAK_PARAMETER_MINIMAL_PEAK_HEIGHT')
    reference_mz: float = Field(400., gt=0, alias='PEAK_PARAMETER_REFERENCE_MZ')
    initial_value: float = Field(.1, alias='PEAK_PARAMETER_INITIAL_VALUE')

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )


PEAK_PARAMETER_CONFIG = PeakParameterConfig()
