"""
Thin HTTP client for the CyborgDB vendor API and the LLM gateway

Every call is a single attempt bounded by the configured timeout. Failures are
logged and the caller gets the local fallback instead of an exception.
"""

import logging

import httpx

from credguard.utils.vectors import epoch_millis, generate_local_vector

logger = logging.getLogger(__name__)

VECTOR_PROMPT = "Generate a unique 64-character hex string. Only respond with the hex string prefixed with 0x."

FALLBACK_MATCHES = [
    {'similarity': 0.95, 'region': 'Europe', 'trust_level': 'High'},
    {'similarity': 0.87, 'region': 'North America', 'trust_level': 'Medium-High'},
    {'similarity': 0.82, 'region': 'Asia-Pacific', 'trust_level': 'Medium'},
]

class CyborgDBClient:
    """Vector generation and similarity search with local fallbacks"""

    def __init__(self, api_key=None, api_url='https://api.cyborgdb.com', llm_api_key=None,
                 llm_url=None, llm_model=None, timeout=15.0):
        self.api_key = api_key
        self.api_url = api_url.rstrip('/')
        self.llm_api_key = llm_api_key
        self.llm_url = llm_url
        self.llm_model = llm_model
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get('CYBORGDB_API_KEY'),
            api_url=config.get('CYBORGDB_API_URL', 'https://api.cyborgdb.com'),
            llm_api_key=config.get('LLM_API_KEY'),
            llm_url=config.get('LLM_GATEWAY_URL'),
            llm_model=config.get('LLM_MODEL'),
            timeout=config.get('HTTP_TIMEOUT', 15.0),
        )

    @property
    def enabled(self):
        """True when the vendor API key is configured"""
        return bool(self.api_key)

    def _post(self, url, api_key, payload):
        """POST JSON with a bearer key; None on any transport or status failure"""
        headers = {
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
        }
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("POST %s returned %d", url, e.response.status_code)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("POST %s failed: %s", url, e)
        return None

    def generate_vector(self, user_id):
        """Raw vector text from the vendor, the LLM, or the local generator"""
        if self.enabled:
            return self._generate_with_vendor(user_id)
        return self._generate_with_llm(user_id)

    def _generate_with_vendor(self, user_id):
        data = self._post(
            f'{self.api_url}/v1/vectors/generate',
            self.api_key,
            {
                'user_id': user_id,
                'timestamp': epoch_millis(),
                'type': 'behavioral_identity',
            },
        )
        vector = (data or {}).get('vector') or (data or {}).get('encrypted_vector')
        if vector:
            logger.info("CyborgDB vector generated for %s", user_id)
            return vector

        logger.info("CyborgDB unavailable, generating vector locally")
        return generate_local_vector()

    def _generate_with_llm(self, user_id):
        if not (self.llm_api_key and self.llm_url):
            return generate_local_vector()

        data = self._post(
            self.llm_url,
            self.llm_api_key,
            {
                'model': self.llm_model,
                'messages': [
                    {'role': 'system', 'content': VECTOR_PROMPT},
                    {'role': 'user', 'content': f'Generate encrypted vector. Seed: {epoch_millis()}-{user_id[:8]}'},
                ],
                'max_tokens': 100,
            },
        )
        try:
            content = data['choices'][0]['message']['content']
        except (TypeError, KeyError, IndexError):
            content = None

        if content and content.strip():
            return content.strip()
        return generate_local_vector()

    def search_similar(self, vector, top_k=5):
        """Matches from the vendor, or the fixed fallback list"""
        if self.enabled and vector:
            data = self._post(
                f'{self.api_url}/v1/vectors/search',
                self.api_key,
                {'vector': vector, 'top_k': top_k, 'encrypted': True},
            )
            matches = (data or {}).get('matches') or (data or {}).get('results')
            if matches:
                return matches

        return [dict(match) for match in FALLBACK_MATCHES]
