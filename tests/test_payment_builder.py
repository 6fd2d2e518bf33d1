from pydantic import BaseModel

from fusionpay import FusionPay
from fusionpay.contracts.payments import PaymentPayload


class OrderInfo(BaseModel):
    userId: int
    orderId: int


def test_empty_builder_sends_only_the_lists(api_url):
    client = FusionPay(api_url)
    assert client.payment_data() == {"article": [], "personal_Info": []}


def test_builder_methods_chain_and_fill_wire_keys(api_url):
    client = FusionPay(api_url)
    returned = (
        client.total_price(200)
        .add_article("sac", 100)
        .add_article("chaussure", 100)
        .add_info({"userId": 1, "orderId": 123})
        .client_name("M. Yaya")
        .client_number("01010101")
        .return_url("https://my_call_back_link.com")
        .webhook_url("https://my_webhook.com/notify")
    )

    assert returned is client
    assert client.payment_data() == {
        "totalPrice": 200,
        "article": [{"sac": 100}, {"chaussure": 100}],
        "personal_Info": [{"userId": 1, "orderId": 123}],
        "numeroSend": "01010101",
        "nomclient": "M. Yaya",
        "return_url": "https://my_call_back_link.com",
        "webhook_url": "https://my_webhook.com/notify",
    }


def test_scalars_keep_last_value_and_lists_append(api_url):
    client = FusionPay(api_url).total_price(100).total_price(250)
    client.add_article("sac", 100).add_article("sac", 150)

    data = client.payment_data()
    assert data["totalPrice"] == 250
    assert data["article"] == [{"sac": 100}, {"sac": 150}]


def test_add_info_accepts_pydantic_models(api_url):
    client = FusionPay(api_url).add_info(OrderInfo(userId=7, orderId=42))
    assert client.payment_data()["personal_Info"] == [{"userId": 7, "orderId": 42}]


def test_payment_data_is_a_copy(api_url):
    client = FusionPay(api_url).add_article("sac", 100)
    client.payment_data()["article"].append({"intrus": 1})
    assert client.payment_data()["article"] == [{"sac": 100}]


def test_payload_omits_unset_scalars():
    payload = PaymentPayload(client_name="Jane")
    assert payload.to_dict() == {"article": [], "personal_Info": [], "nomclient": "Jane"}
