from flask import Flask, request

from .constants import DEBUG_MODE, SERVICE_NAME, get_webhook_url
from .exceptions import ConfigurationError, DeliveryError, RelayError
from .formatters import render
from .models import parse_alert_group
from .services import deliver_all

TEXT_HEADERS = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app():
    app = Flask(__name__)

    # Checagem de startup: só avisa, a URL é relida a cada requisição
    try:
        get_webhook_url()
    except ConfigurationError:
        print("[WARN] DISCORD_WEBHOOK_URL não definida; alertas vão falhar até ser configurada")

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route('/', methods=['POST'])
    @app.route('/alert', methods=['POST'])
    def alert():
        try:
            return forward_alert(request.get_data())
        except DeliveryError as e:
            print(f"[ERROR] {e} (delivered={e.delivered}, status_code={e.status_code})")
            return f'Error: {e} (delivered {e.delivered} before failure)', 400, TEXT_HEADERS
        except RelayError as e:
            print(f"[ERROR] {e}")
            return f'Error: {e}', 400, TEXT_HEADERS
        except Exception as e:
            # qualquer falha inesperada também vira 400
            print(f"[ERROR] unexpected: {type(e).__name__}: {e}")
            return f'Error: {type(e).__name__}', 400, TEXT_HEADERS

    def forward_alert(body):
        group = parse_alert_group(body)
        if DEBUG_MODE:
            print(f"[DEBUG] Received group: status={group.status.value} alerts={len(group.alerts)} "
                  f"truncated={group.truncated_alerts} labels={group.common_labels}")

        webhook_url = get_webhook_url()
        envelopes = render(group)
        if DEBUG_MODE:
            print(f"[DEBUG] {len(envelopes)} envelope(s) para enviar")

        deliver_all(envelopes, webhook_url)
        return 'OK', 200, TEXT_HEADERS

    return app
