# API Route Constants

# Base API
API_BASE = '/api'

# Router prefixes
PUBLIC_GAMES = f'{API_BASE}/public/games'
AUTH_BASE = f'{API_BASE}/auth'
TICKETING_BASE = f'{API_BASE}/ticketing'
