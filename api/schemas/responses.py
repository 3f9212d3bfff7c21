from pydantic import BaseModel, Field


class BorderRate(BaseModel):
	currency: str = Field(..., description='Currency code of the bordering country')
	rate: str = Field(..., description='Rate against the base currency, as decimal text')


class BorderExchangeResponse(BaseModel):
	rates: dict[str, BorderRate] = Field(..., description='Rates keyed by bordering country name')
	base: str = Field(..., description='Currency code of the queried country')

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'rates': {
					'Sweden': {'currency': 'SEK', 'rate': '0.950000'},
					'Finland': {'currency': 'EUR', 'rate': '0.000000'},
				},
				'base': 'NOK',
			}
		}


class RateHistoryResponse(BaseModel):
	rates: dict[str, dict[str, float]] = Field(..., description='Rates keyed by date')
	start_at: str = Field(..., description='First day of the range')
	base: str = Field(..., description='Base currency of the rates')
	end_at: str = Field(..., description='Last day of the range')


class DiagnosticResponse(BaseModel):
	exchangeratesapi: str = Field(..., description='HTTP status of the rates service')
	restcountries: str = Field(..., description='HTTP status of the countries service')
	version: str
	uptime: str = Field(..., description='Seconds since the process started')

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'exchangeratesapi': '200',
				'restcountries': '200',
				'version': 'v1',
				'uptime': '1200s',
			}
		}
