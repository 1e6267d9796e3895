def test_create_and_list(client, supplier_payload):
    response = client.post("/api/suppliers", json=supplier_payload())

    assert response.status_code == 201
    assert response.json() == {"message": "Supplier created successfully", "supplierId": 1}

    listed = client.get("/api/suppliers", params={"companyId": 1})
    assert listed.status_code == 200
    [record] = listed.json()
    assert record["SupplierId"] == 1
    assert record["Supplier"] == "Acme Traders"
    assert record["City"] == 7
    assert record["OpBalAmt"] == "150.00"
    assert record["OpType"] == "Dr"
    assert record["CompId"] == 1
    assert record["LastUpdate"] is not None


def test_list_accepts_company_header(client, supplier_payload):
    client.post("/api/suppliers", json=supplier_payload())

    response = client.get("/api/suppliers", headers={"company-id": "1"})

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_list_without_company_is_400(client):
    response = client.get("/api/suppliers")

    assert response.status_code == 400
    assert response.json() == {"message": "Company ID is required"}


def test_list_with_bad_company_is_400(client):
    assert client.get("/api/suppliers", params={"companyId": "abc"}).status_code == 400


def test_get_one(client, supplier_payload):
    client.post("/api/suppliers", json=supplier_payload())

    assert client.get("/api/suppliers/1").json()["Mobile_No"] == "9876543210"
    missing = client.get("/api/suppliers/99")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Supplier not found"}


def test_create_with_unknown_city(client, supplier_payload):
    response = client.post("/api/suppliers", json=supplier_payload(City=999))

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid city code: 999. Please select a valid city."
    assert client.get("/api/suppliers", params={"companyId": 1}).json() == []


def test_create_requires_name(client, supplier_payload):
    payload = supplier_payload()
    del payload["Supplier"]

    assert client.post("/api/suppliers", json=payload).status_code == 422


def test_update_flow(client, supplier_payload):
    client.post("/api/suppliers", json=supplier_payload())
    body = supplier_payload(Mailid="accounts@acme.in", OpBalAmt=-20, OpType="Cr")

    missing_header = client.put("/api/suppliers/1", json=body)
    assert missing_header.status_code == 400
    assert missing_header.json() == {"message": "Company ID is required in headers"}

    wrong_company = client.put("/api/suppliers/1", json=body, headers={"company-id": "2"})
    assert wrong_company.status_code == 404

    bad_city = client.put("/api/suppliers/1", json=supplier_payload(City=999), headers={"company-id": "1"})
    assert bad_city.status_code == 400

    ok = client.put("/api/suppliers/1", json=body, headers={"company-id": "1"})
    assert ok.status_code == 200
    assert ok.json() == {"message": "Supplier updated successfully", "supplierId": 1}
    record = client.get("/api/suppliers/1").json()
    assert record["Mailid"] == "accounts@acme.in"
    assert record["OpBalAmt"] == "-20.00"
    assert record["OpType"] == "Cr"


def test_update_of_other_company_record(client, supplier_payload, foreign_supplier):
    response = client.put("/api/suppliers/5", json=supplier_payload(), headers={"company-id": "1"})

    assert response.status_code == 404
    assert response.json() == {"message": "Supplier not found or does not belong to the company"}


def test_delete(client, supplier_payload):
    client.post("/api/suppliers", json=supplier_payload())

    assert client.delete("/api/suppliers/1").status_code == 400
    assert client.delete("/api/suppliers/1", headers={"company-id": "2"}).status_code == 404
    assert client.delete("/api/suppliers/1", headers={"company-id": "1"}).status_code == 200
    assert client.get("/api/suppliers/1").status_code == 404


def test_credit_balance_is_stored_negative(client, supplier_payload):
    client.post("/api/suppliers", json=supplier_payload(OpBalAmt="150", OpType="Cr"))

    record = client.get("/api/suppliers/1").json()
    assert record["OpBalAmt"] == "-150.00"
    assert record["OpType"] == "Cr"

    body = supplier_payload(OpBalAmt="-35.10", OpType="Dr")
    assert client.put("/api/suppliers/1", json=body, headers={"company-id": "1"}).status_code == 200
    assert client.get("/api/suppliers/1").json()["OpBalAmt"] == "35.10"
